import random
from typing import Optional
from perfect_maze.core.grid import Grid
from perfect_maze.algo.kruskal import GENERATORS
from perfect_maze.algo.solvers import BFS
from perfect_maze.viz.ascii import AsciiRenderer

class Maze:
    """
    A generated grid plus the operations the front ends need:
    wall masks for drawing and the solution string.
    """
    def __init__(self, grid: Grid, generator=None):
        self.grid = grid
        self.generator = generator

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def wall_mask(self, row: int, col: int) -> int:
        return self.grid.wall_mask(row, col)

    def solver(self) -> BFS:
        solver = BFS(self.grid)
        solver.solve()
        return solver

    def solve(self) -> str:
        return BFS(self.grid).solve()

    def render(self, show_solution: bool = False) -> str:
        path = self.solver().path_cells() if show_solution else None
        return AsciiRenderer(self.grid).render(path)

def new_maze(rows: int, cols: int, seed: int = None,
             rng: Optional[random.Random] = None, algo: str = "lazy") -> Maze:
    """Builds a rows x cols grid and carves a perfect maze into it."""
    if algo not in GENERATORS:
        raise ValueError(f"Unknown generator '{algo}', expected one of {sorted(GENERATORS)}")
    grid = Grid(rows, cols)
    generator = GENERATORS[algo](grid, seed=seed, rng=rng)
    generator.run_all()
    return Maze(grid, generator)
