import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from perfect_maze.core.grid import Grid
from perfect_maze.core.stats import MazeStats
from perfect_maze.algo.kruskal import LazyKruskal
from perfect_maze.algo.solvers import BFS
from perfect_maze.viz.ascii import AsciiRenderer
from perfect_maze.viz.renderer import Renderer
from perfect_maze.maze import new_maze

class TestAsciiRenderer(unittest.TestCase):
    def test_single_cell(self):
        grid = Grid(1, 1)
        self.assertEqual(AsciiRenderer(grid).render(), "+   +\n     \n+   +")
        self.assertEqual(AsciiRenderer(grid).render([0]), "+   +\n  @  \n+   +")

    def test_corridor(self):
        grid = Grid(1, 3)
        grid.clear_wall(0, Grid.EAST)
        grid.clear_wall(1, Grid.EAST)
        expected = "\n".join([
            "+   +---+---+",
            "  @   @   @  ",
            "+---+---+   +",
        ])
        bfs = BFS(grid)
        self.assertEqual(bfs.solve(), "EE")
        self.assertEqual(AsciiRenderer(grid).render(bfs.path_cells()), expected)

    def test_shape(self):
        maze = new_maze(4, 7, seed=8)
        lines = maze.render(show_solution=True).split("\n")
        self.assertEqual(len(lines), 4 * 2 + 1)
        for line in lines:
            self.assertEqual(len(line), 7 * 4 + 1)
        # One mark per cell on the path
        marks = sum(line.count("@") for line in lines)
        self.assertEqual(marks, len(maze.solve()) + 1)
        self.assertNotIn("@", maze.render())

class TestPygameRenderer(unittest.TestCase):
    def make_renderer(self, grid, **kwargs):
        renderer = Renderer(grid, width=300, height=300, **kwargs)
        renderer.surface = pygame.Surface((300, 300))
        renderer.fit_to_screen()
        return renderer

    def test_fit_to_screen(self):
        renderer = self.make_renderer(Grid(2, 4))
        # 220px across 4 columns, centered
        self.assertAlmostEqual(renderer.cell_size, 55.0)
        self.assertAlmostEqual(renderer.offset_x, 40.0)
        self.assertAlmostEqual(renderer.offset_y, 95.0)
        self.assertEqual(renderer.screen_to_world(*renderer.world_to_screen(3, 1)), (3, 1))

    def test_solution_overlay(self):
        maze = new_maze(3, 3, seed=4)
        renderer = self.make_renderer(maze.grid, solver=BFS(maze.grid))
        renderer.step()
        self.assertTrue(renderer.solved)
        self.assertEqual(renderer.path_cells[0], 0)
        self.assertEqual(renderer.path_cells[-1], 8)

        renderer.draw_grid()
        half = int(renderer.cell_size / 2)
        for cell in (0, 8):
            row, col = divmod(cell, 3)
            sx, sy = renderer.world_to_screen(col, row)
            color = tuple(renderer.surface.get_at((int(sx) + half, int(sy) + half)))[:3]
            self.assertEqual(color, Renderer.COLOR_SOLUTION)

    def test_steps_generation_then_solve(self):
        grid = Grid(6, 6)
        renderer = self.make_renderer(grid, generator=LazyKruskal(grid, seed=2), solver=BFS(grid))
        for _ in range(100):
            if renderer.solved:
                break
            renderer.step(gen_steps=1)
        self.assertTrue(renderer.gen_finished)
        self.assertTrue(renderer.solved)
        self.assertTrue(MazeStats.is_perfect(grid))
        self.assertEqual(len(renderer.path_cells), len(BFS(grid).solve()) + 1)

if __name__ == '__main__':
    unittest.main()
