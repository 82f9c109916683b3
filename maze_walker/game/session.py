import logging
from typing import Callable, Optional

from maze_walker.core.direction import Direction, Move
from maze_walker.core.grid import Grid
from maze_walker.game.movement import Outcome, move_for_key, step

logger = logging.getLogger(__name__)


class Session:
    """Player state for one walk through a generated maze."""

    def __init__(self, grid: Grid, cell: int, facing: Direction):
        self.grid = grid
        self.cell = cell
        self.facing = facing
        self.moves = 0
        self.last_outcome: Optional[Outcome] = None

    @property
    def finished(self) -> bool:
        return self.last_outcome == Outcome.EXITED

    def apply(self, move: Move) -> Outcome:
        before = self.cell
        self.cell, self.facing, outcome = step(self.grid, self.cell, self.facing, move)
        self.last_outcome = outcome
        # Turns report MOVED too; only a change of cell is a step
        if self.cell != before:
            self.moves += 1
        logger.debug(f"{move.name} -> {outcome.name} at cell {self.cell} facing {self.facing.name}")
        return outcome

    def play(self, read_key: Callable[[], str], show: Callable[["Session"], None]) -> int:
        """
        Blocks on read_key() until the player walks out of the maze.
        Unbound keys are ignored. Calls show() once up front and after every
        accepted key. Returns the number of cells walked.
        """
        show(self)
        while not self.finished:
            key = read_key()
            if not key:
                raise EOFError("Key input closed before leaving the maze")
            move = move_for_key(key)
            if move is None:
                continue
            if self.apply(move) == Outcome.EXITED:
                break
            show(self)
        return self.moves
