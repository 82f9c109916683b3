import logging
import random
from typing import Iterator, Optional, Tuple
from maze_walker.core.direction import Direction, turn_back, turn_left, turn_right
from maze_walker.core.grid import Grid
from maze_walker.core.stack import CellStack
from maze_walker.algo.base import Generator

logger = logging.getLogger(__name__)


class BiasedBacktracker(Generator):
    """
    Iterative depth-first backtracker that prefers to keep walking straight.

    The first direction tried at every step is the current facing half of the
    time and a quarter turn left or right otherwise, so corridors come out
    longer than with a uniform neighbor choice.
    """

    def open_entrance(self, rng: random.Random) -> Tuple[int, Direction]:
        """Opens one outer wall. Returns the entrance cell and the inward facing."""
        grid = self.grid
        x = rng.randrange(1, grid.width + 1)
        y = rng.randrange(1, grid.height + 1)
        facing = Direction(rng.randrange(4))

        # Walking in with 'facing' means entering from the opposite edge
        if facing == Direction.NORTH:
            y = grid.height
        elif facing == Direction.SOUTH:
            y = 1
        elif facing == Direction.EAST:
            x = 1
        elif facing == Direction.WEST:
            x = grid.width

        cell = grid.cell_index(x, y)
        grid.open_wall(turn_back(facing), cell)
        logger.debug(f"Entrance at ({x}, {y}) through the {turn_back(facing).name} wall")
        return cell, facing

    def find_untouched(self, rng: random.Random, cell: int, facing: Direction) -> Optional[Direction]:
        clockwise = rng.random() < 0.5
        roll = rng.random()

        # 50% ahead, 25% left, 25% right as the first guess
        direction = facing
        if 0.5 < roll <= 0.75:
            direction = turn_left(facing)
        elif roll > 0.75:
            direction = turn_right(facing)

        for _ in range(4):
            if self.grid.is_untouched_neighbor(direction, cell):
                return direction
            direction = turn_right(direction) if clockwise else turn_left(direction)
        return None

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        grid = self.grid
        self.stack = stack = CellStack(grid.cell_count)

        cell, facing = self.open_entrance(rng)
        stack.push(cell)
        self.cursor, self.facing = cell, facing
        yield "Entrance"

        while True:
            # Position where this search starts; the last one becomes the start cell
            last = cell
            direction = self.find_untouched(rng, cell, facing)

            while direction is None:
                # Dead end: drop it and resume from the cell below
                stack.pop()
                if not stack:
                    break
                cell = stack.peek()
                self.cursor = cell
                yield f"Backtracking... Stack: {len(stack)}"
                direction = self.find_untouched(rng, cell, facing)

            if direction is None:
                break

            cell = grid.carve(direction, cell)
            facing = direction
            stack.push(cell)
            self.cursor, self.facing = cell, facing
            self.step_count += 1
            yield f"Carving... Stack: {len(stack)}"

        self.cursor, self.facing = last, facing
        logger.debug(f"Generation finished after {self.step_count} carves, {stack.push_count} pushes")
        yield "Done"


def generate(width: int, height: int, seed: int = None) -> Tuple[Grid, int, Direction]:
    """
    Builds a perfect maze of width x height cells.
    Returns (grid, start cell, start facing). Raises DimensionError on bad sizes.
    """
    grid = Grid(width, height)
    start_cell, start_facing = BiasedBacktracker(grid, seed=seed).run_all()
    return grid, start_cell, start_facing
