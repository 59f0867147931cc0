from array import array
from enum import IntFlag
from typing import Iterator, Optional, Tuple

class Direction(IntFlag):
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    @property
    def symbol(self) -> str:
        return self.name[0]

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITE[self]

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

class Grid:
    """
    rows x cols maze stored as one byte per cell, row-major
    (cell = row * cols + col). The low four bits are walls: set = closed.
    """
    NORTH = Direction.NORTH
    EAST  = Direction.EAST
    SOUTH = Direction.SOUTH
    WEST  = Direction.WEST

    # Fixed scan order used by the generator and the solver's tie-break
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = int(NORTH | EAST | SOUTH | WEST)

    # Boundary openings on the first and last cell
    ENTRANCE = int(NORTH | WEST)
    EXIT     = int(SOUTH | EAST)

    __slots__ = ('rows', 'cols', 'size', 'cells', 'disjoint_set')

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Maze dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.size = rows * cols
        # 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * self.size)
        self.cells[0] &= ~self.ENTRANCE
        self.cells[self.size - 1] &= ~self.EXIT

        # Set by the generator; inert once the maze is built
        self.disjoint_set = None

    @property
    def start(self) -> int:
        return 0

    @property
    def terminal(self) -> int:
        return self.size - 1

    def index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def _check_cell(self, cell: int):
        if not (0 <= cell < self.size):
            raise IndexError(f"Cell index {cell} out of bounds")

    def row_col(self, cell: int) -> Tuple[int, int]:
        self._check_cell(cell)
        return divmod(cell, self.cols)

    def wall_mask(self, row: int, col: int) -> int:
        return self.cells[self.index(row, col)] & self.ALL_WALLS

    def has_wall(self, cell: int, direction: Direction) -> bool:
        self._check_cell(cell)
        return (self.cells[cell] & direction) != 0

    def is_fully_open(self, cell: int) -> bool:
        self._check_cell(cell)
        return (self.cells[cell] & self.ALL_WALLS) == 0

    def neighbor(self, cell: int, direction: Direction) -> Optional[int]:
        """Index of the adjacent cell in 'direction', or None at the boundary."""
        self._check_cell(cell)
        cols = self.cols
        if direction == self.NORTH:
            target = cell - cols
            return target if target >= 0 else None
        if direction == self.SOUTH:
            target = cell + cols
            return target if target < self.size else None
        if direction == self.EAST:
            target = cell + 1
            return target if target // cols == cell // cols else None
        if direction == self.WEST:
            target = cell - 1
            # -1 // cols is -1, so column 0 of row 0 is handled too
            return target if target // cols == cell // cols else None
        raise ValueError(f"Unknown direction: {direction!r}")

    def can_step(self, cell: int, direction: Direction) -> bool:
        if self.neighbor(cell, direction) is None:
            return False
        return not self.has_wall(cell, direction)

    def clear_wall(self, cell: int, direction: Direction) -> Optional[int]:
        """
        Removes the wall between 'cell' and its neighbor in 'direction',
        and the OPPOSITE wall on the neighbor. Returns the neighbor index.
        """
        target = self.neighbor(cell, direction)
        if target is None:
            return None # Cannot carve into void

        self.cells[cell] &= ~int(direction)
        self.cells[target] &= ~int(Direction(direction).opposite)
        return target

    def get_neighbors(self, cell: int) -> Iterator[Tuple[int, Direction]]:
        """
        Yields (neighbor, direction) for every on-grid neighbor, N, E, S, W order.
        Does NOT check walls.
        """
        for direction in self.DIRECTIONS:
            target = self.neighbor(cell, direction)
            if target is not None:
                yield target, direction

    def open_neighbors(self, cell: int) -> Iterator[Tuple[int, Direction]]:
        for target, direction in self.get_neighbors(cell):
            if not self.has_wall(cell, direction):
                yield target, direction

    def count_openings(self) -> int:
        """Number of open walls between two cells (boundary openings excluded)."""
        openings = 0
        for cell in range(self.size):
            for direction in (self.EAST, self.SOUTH):
                if self.can_step(cell, direction):
                    openings += 1
        return openings
