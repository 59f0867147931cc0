import logging
from array import array
from typing import Iterator, List
from perfect_maze.core.fifo import FifoQueue
from perfect_maze.core.grid import Direction, Grid

logger = logging.getLogger(__name__)

UNVISITED = -1

class BFS:
    """
    Breadth-first shortest path from the first cell to the last.

    run() fills self.cost (hop count per cell, UNVISITED if never reached)
    and then rebuilds self.path walking backwards from the terminal.
    Among equally short paths the one preferring N, then E, S, W at the
    first divergence (seen from the terminal) is returned.
    """
    PROGRESS_INTERVAL = 100

    def __init__(self, grid: Grid):
        self.grid = grid
        self.cost = array('i')
        self.path: List[Direction] = []
        self.visited_count = 0

    def run(self) -> Iterator[str]:
        grid = self.grid
        start, terminal = grid.start, grid.terminal

        # Transient: rebuilt on every run
        self.cost = array('i', [UNVISITED] * grid.size)
        self.path = []
        cost = self.cost

        cost[start] = 0
        self.visited_count = 1
        queue = FifoQueue()
        queue.enqueue(start)

        while not queue.is_empty():
            current = queue.dequeue()
            if current == terminal:
                break

            for direction in Grid.DIRECTIONS:
                if not grid.can_step(current, direction):
                    continue
                neighbor = grid.neighbor(current, direction)
                if cost[neighbor] == UNVISITED:
                    cost[neighbor] = cost[current] + 1
                    self.visited_count += 1
                    queue.enqueue(neighbor)

            if self.visited_count % self.PROGRESS_INTERVAL == 0:
                yield f"Visited: {self.visited_count}"

        self.reconstruct_path()
        yield "Solved"

    def reconstruct_path(self):
        grid = self.grid
        cost = self.cost
        curr = grid.terminal

        if cost[curr] == UNVISITED:
            logger.warning("Terminal cell %d is unreachable from the start", curr)
            return

        reversed_steps: List[Direction] = []
        target = cost[curr] - 1
        while target >= 0:
            for direction in Grid.DIRECTIONS:
                if not grid.can_step(curr, direction):
                    continue
                neighbor = grid.neighbor(curr, direction)
                if cost[neighbor] == target:
                    # Walking backwards: the forward step is the opposite way
                    reversed_steps.append(direction.opposite)
                    curr = neighbor
                    target -= 1
                    break
            else:
                raise RuntimeError(f"Distance table broken at cell {curr} (expected {target})")

        reversed_steps.reverse()
        self.path = reversed_steps

    def solve(self) -> str:
        """Runs the search to completion and returns the path as N/E/S/W symbols."""
        for _ in self.run():
            pass
        return "".join(d.symbol for d in self.path)

    def path_cells(self) -> List[int]:
        """Cell indices along self.path, start and terminal included."""
        if not len(self.cost):
            # Never ran; an empty path here would read as "unreachable"
            self.solve()
        if not self.path and self.grid.start != self.grid.terminal:
            return []
        curr = self.grid.start
        cells = [curr]
        for direction in self.path:
            curr = self.grid.neighbor(curr, direction)
            cells.append(curr)
        return cells
