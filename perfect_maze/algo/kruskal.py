import logging
from typing import Iterator, List, Tuple
from perfect_maze.core.disjoint_set import DisjointSet
from perfect_maze.core.grid import Grid
from perfect_maze.algo.base import Generator

logger = logging.getLogger(__name__)

# Every bit of the per-cell "tried" mask set
ALL_TRIED = Grid.ALL_WALLS

class LazyKruskal(Generator):
    """
    Randomized Kruskal without an edge list: pick a random cell, then random
    directions until one bridges two components (or all four are spent).
    Runs until the disjoint set holds a single component.
    """
    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        ds = DisjointSet(grid.size)
        grid.disjoint_set = ds

        directions = Grid.DIRECTIONS
        attempts = 0

        while ds.component_count > 1:
            # Fully open cells have nothing left to knock down
            cell = rng.randrange(grid.size)
            while grid.is_fully_open(cell):
                cell = rng.randrange(grid.size)
            attempts += 1

            tried = 0
            while tried != ALL_TRIED:
                direction = directions[rng.randrange(4)]
                tried |= direction
                neighbor = grid.neighbor(cell, direction)
                if neighbor is not None and not ds.connected(cell, neighbor):
                    grid.clear_wall(cell, direction)
                    ds.union(cell, neighbor)
                    self.step_count += 1
                    if self.step_count % self.PROGRESS_INTERVAL == 0:
                        yield f"Components: {ds.component_count}"
                    break

        logger.debug("Lazy Kruskal: %d unions over %d cell samples", self.step_count, attempts)
        yield "Done"

class ShuffledKruskal(Generator):
    """Classic randomized Kruskal over a shuffled list of interior walls."""
    def run(self) -> Iterator[str]:
        grid = self.grid
        ds = DisjointSet(grid.size)
        grid.disjoint_set = ds

        # Each interior wall once: East and South of every cell
        edges: List[Tuple[int, int, int]] = []
        for cell in range(grid.size):
            for direction in (Grid.EAST, Grid.SOUTH):
                neighbor = grid.neighbor(cell, direction)
                if neighbor is not None:
                    edges.append((cell, neighbor, direction))
        self.rng.shuffle(edges)

        for cell, neighbor, direction in edges:
            if ds.component_count == 1:
                break
            if not ds.connected(cell, neighbor):
                grid.clear_wall(cell, direction)
                ds.union(cell, neighbor)
                self.step_count += 1
                if self.step_count % self.PROGRESS_INTERVAL == 0:
                    yield f"Components: {ds.component_count}"

        yield "Done"

GENERATORS = {
    "lazy": LazyKruskal,
    "kruskal": ShuffledKruskal,
}
