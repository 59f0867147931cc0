from typing import Iterable, List, Optional
from perfect_maze.core.grid import Grid

class AsciiRenderer:
    """
    Text view of a grid. Each cell is three characters wide:

        +---+---+
        | @   @ |
        +---+   +
    """
    CORNER = "+"
    H_WALL = "---"
    H_OPEN = "   "
    V_WALL = "|"
    V_OPEN = " "
    MARK = " @ "
    BLANK = "   "

    def __init__(self, grid: Grid):
        self.grid = grid

    def _horizontal(self, row: int, direction) -> str:
        parts = []
        for col in range(self.grid.cols):
            mask = self.grid.wall_mask(row, col)
            parts.append(self.CORNER)
            parts.append(self.H_WALL if mask & direction else self.H_OPEN)
        parts.append(self.CORNER)
        return "".join(parts)

    def render(self, path_cells: Optional[Iterable[int]] = None) -> str:
        grid = self.grid
        marked = set(path_cells) if path_cells else set()
        lines: List[str] = []

        for row in range(grid.rows):
            lines.append(self._horizontal(row, Grid.NORTH))

            parts = []
            for col in range(grid.cols):
                mask = grid.wall_mask(row, col)
                parts.append(self.V_WALL if mask & Grid.WEST else self.V_OPEN)
                cell = row * grid.cols + col
                parts.append(self.MARK if cell in marked else self.BLANK)
            last = grid.wall_mask(row, grid.cols - 1)
            parts.append(self.V_WALL if last & Grid.EAST else self.V_OPEN)
            lines.append("".join(parts))

        lines.append(self._horizontal(grid.rows - 1, Grid.SOUTH))
        return "\n".join(lines)
