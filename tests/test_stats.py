import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.grid import Grid
from perfect_maze.core.stats import MazeStats
from perfect_maze.algo.kruskal import LazyKruskal

class TestStats(unittest.TestCase):
    def test_stats_add_up(self):
        w, h = 20, 20
        grid = Grid(h, w)
        LazyKruskal(grid, seed=42).run_all()

        stats = MazeStats.calculate_stats(grid)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)
        self.assertEqual(stats["openings"], w * h - 1)

    def test_corridor_counts(self):
        grid = Grid(1, 4)
        for cell in range(3):
            grid.clear_wall(cell, Grid.EAST)
        stats = MazeStats.calculate_stats(grid)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 2)
        self.assertEqual(stats["junctions"], 0)
        self.assertEqual(stats["dead_end_percent"], 50.0)

    def test_is_perfect_rejects_cycles(self):
        grid = Grid(2, 2)
        grid.clear_wall(0, Grid.EAST)
        grid.clear_wall(0, Grid.SOUTH)
        grid.clear_wall(1, Grid.SOUTH)
        self.assertTrue(MazeStats.is_perfect(grid))

        grid.clear_wall(2, Grid.EAST)
        self.assertFalse(MazeStats.is_perfect(grid))

    def test_is_perfect_rejects_disconnected(self):
        grid = Grid(2, 2)
        grid.clear_wall(0, Grid.EAST)
        self.assertEqual(MazeStats.reachable_count(grid), 2)
        self.assertFalse(MazeStats.is_perfect(grid))

if __name__ == '__main__':
    unittest.main()
