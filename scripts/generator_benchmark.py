import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.grid import Grid
from perfect_maze.core.stats import MazeStats
from perfect_maze.algo.kruskal import LazyKruskal, ShuffledKruskal
from perfect_maze.algo.solvers import BFS

def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols:,} cells) ---")

    for name, cls in (("Lazy Kruskal", LazyKruskal), ("Shuffled Kruskal", ShuffledKruskal)):
        grid = Grid(rows, cols)
        gen_start = time.time()
        cls(grid, seed=42).run_all()
        gen_time = time.time() - gen_start

        solve_start = time.time()
        path = BFS(grid).solve()
        solve_time = time.time() - solve_start

        stats = MazeStats.calculate_stats(grid)
        print(f"{name:<18} gen {gen_time:.4f}s ({grid.size / gen_time:,.0f} cells/sec) | "
              f"solve {solve_time:.4f}s | path {len(path)} | dead ends {stats['dead_end_percent']:.1f}%")

def run_suite():
    # Rejection sampling slows down as the maze nears completion,
    # so the gap widens with size
    sizes = [
        (50, 50),
        (100, 100),
        (200, 200),
        (400, 400),
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()
