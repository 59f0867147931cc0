from perfect_maze.core.fifo import FifoQueue
from perfect_maze.core.grid import Grid

class MazeStats:
    @staticmethod
    def _open_sides(grid: Grid, cell: int) -> int:
        return sum(1 for _ in grid.open_neighbors(cell))

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0
        junctions = 0 # 3 or 4 exits

        # Count exits to other cells, not wall bits, so the
        # entrance/exit openings on the boundary don't skew things
        for cell in range(grid.size):
            exits = MazeStats._open_sides(grid, cell)
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1

        total = grid.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "openings": grid.count_openings(),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def reachable_count(grid: Grid, start: int = 0) -> int:
        seen = bytearray(grid.size)
        seen[start] = 1
        count = 1
        queue = FifoQueue()
        queue.enqueue(start)
        while queue:
            cell = queue.dequeue()
            for neighbor, _ in grid.open_neighbors(cell):
                if not seen[neighbor]:
                    seen[neighbor] = 1
                    count += 1
                    queue.enqueue(neighbor)
        return count

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Spanning tree check: n*m - 1 openings and every cell reachable.
        Connected with exactly that many edges implies no cycles.
        """
        if grid.count_openings() != grid.size - 1:
            return False
        return MazeStats.reachable_count(grid) == grid.size
