import pygame
from typing import List
from perfect_maze.core.grid import Grid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_SCANNED = (60, 100, 160)# Blue tint
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, grid: Grid, generator=None, solver=None, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.solver = solver
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_iter = generator.run() if generator is not None else None
        self.gen_finished = generator is None
        self.solved = False
        self.path_cells: List[int] = []

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.cols
        zoom_y = available_h / self.grid.rows

        # Taking minimum zoom to fit both dimensions
        self.cell_size = min(zoom_x, zoom_y)

        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Perfect Maze - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, col, row):
        sx = col * self.cell_size + self.offset_x
        sy = row * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        col = (sx - self.offset_x) / self.cell_size
        row = (sy - self.offset_y) / self.cell_size
        return int(col), int(row)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.5, min(200.0, self.cell_size))

                # Keep mouse over the same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def visible_range(self):
        start_col = max(0, int((-self.offset_x) / self.cell_size))
        start_row = max(0, int((-self.offset_y) / self.cell_size))
        end_col = min(self.grid.cols, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_row = min(self.grid.rows, int((self.screen_height - self.offset_y) / self.cell_size) + 1)
        return start_row, end_row, start_col, end_col

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        start_row, end_row, start_col, end_col = self.visible_range()
        size = int(self.cell_size) + 1

        # 1. Solver distances (cells the BFS reached)
        if self.solver is not None and len(self.solver.cost):
            cost = self.solver.cost
            for row in range(start_row, end_row):
                for col in range(start_col, end_col):
                    if cost[row * self.grid.cols + col] >= 0:
                        px, py = self.world_to_screen(col, row)
                        pygame.draw.rect(self.surface, self.COLOR_SCANNED, (int(px), int(py), size, size))

        # 2. Solution path
        for cell in self.path_cells:
            row, col = self.grid.row_col(cell)
            if start_row <= row < end_row and start_col <= col < end_col:
                px, py = self.world_to_screen(col, row)
                pygame.draw.rect(self.surface, self.COLOR_SOLUTION, (int(px), int(py), size, size))

        # 3. Walls, skipped when zoomed far out
        if self.cell_size <= 4.0:
            return
        wall_color = self.COLOR_WALL
        for row in range(start_row, end_row):
            for col in range(start_col, end_col):
                cell = self.grid.cells[row * self.grid.cols + col]
                px, py = self.world_to_screen(col, row)
                px, py = int(px), int(py)

                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)
                if row == 0 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
                if col == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Generating" if not self.gen_finished else ("Solved" if self.solved else "Done")
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.cols} ({self.grid.size:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]
        if self.solved:
            info.append(f"Path: {max(0, len(self.path_cells) - 1)} steps")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self, gen_steps: int = 1000):
        """Advances generation, then the solver once the maze is complete."""
        if not self.gen_finished:
            try:
                for _ in range(gen_steps):
                    next(self.gen_iter)
            except StopIteration:
                self.gen_finished = True
            return

        if self.solver is not None and not self.solved:
            self.solver.solve()
            self.path_cells = self.solver.path_cells()
            self.solved = True

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.step()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
