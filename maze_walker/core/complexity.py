from collections import deque
from typing import List, Set, Tuple

from maze_walker.core.direction import Direction
from maze_walker.core.grid import Grid


def popcount_walls(val: int) -> int:
    c = 0
    if val & Grid.NORTH: c += 1
    if val & Grid.EAST: c += 1
    if val & Grid.SOUTH: c += 1
    if val & Grid.WEST: c += 1
    return c


class MazeInspector:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Counts opened wall pairs between two interior cells.
        Only EAST and SOUTH are checked so every pair is counted once.
        """
        passages = 0
        for cell in grid.interior_cells():
            for direction in (Direction.EAST, Direction.SOUTH):
                if grid.is_border(direction, cell):
                    continue
                if not grid.is_wall_closed(direction, cell):
                    passages += 1
        return passages

    @staticmethod
    def border_openings(grid: Grid) -> List[Tuple[int, Direction]]:
        """Returns (cell, direction) for every wall opened toward the border."""
        openings = []
        for cell in grid.interior_cells():
            for direction in Direction:
                if grid.is_border(direction, cell) and not grid.is_wall_closed(direction, cell):
                    openings.append((cell, direction))
        return openings

    @staticmethod
    def reachable_cells(grid: Grid, start: int) -> Set[int]:
        """Flood fill through open walls, staying inside the border."""
        seen = {start}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for direction in Direction:
                if grid.is_wall_closed(direction, cell) or grid.is_border(direction, cell):
                    continue
                other = grid.neighbor(direction, cell)
                if other not in seen:
                    seen.add(other)
                    queue.append(other)
        return seen

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # A connected graph with n - 1 edges is a tree.
        if MazeInspector.count_passages(grid) != grid.cell_count - 1:
            return False
        if len(MazeInspector.border_openings(grid)) != 1:
            return False
        start = grid.cell_index(1, 1)
        return len(MazeInspector.reachable_cells(grid, start)) == grid.cell_count

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0 # 2 walls
        junctions = 0 # 0, 1 walls

        for cell in grid.interior_cells():
            walls = popcount_walls(grid.cells[cell])
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = grid.cell_count
        return {
            "passages": MazeInspector.count_passages(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
