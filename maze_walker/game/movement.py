from enum import Enum
from typing import Optional, Tuple

from maze_walker.core.direction import Direction, Move, apply_turn
from maze_walker.core.grid import Grid


class Outcome(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    EXITED = "exited"


#   i        w
# j k l    a s d
KEY_BINDINGS = {
    "i": Move.FORWARD,
    "j": Move.TURN_LEFT,
    "k": Move.TURN_BACK,
    "l": Move.TURN_RIGHT,
    "w": Move.FORWARD,
    "a": Move.TURN_LEFT,
    "s": Move.TURN_BACK,
    "d": Move.TURN_RIGHT,
}


def move_for_key(key: str) -> Optional[Move]:
    return KEY_BINDINGS.get(key.lower()) if key else None


def step(grid: Grid, cell: int, facing: Direction, move: Move) -> Tuple[int, Direction, Outcome]:
    """
    Resolves one relative move. Returns (cell, facing, outcome).

    Turns always succeed and report MOVED with the cell unchanged. A closed
    wall gives BLOCKED even on the outer ring; only the open entrance wall
    gives EXITED, and the position is left on the entrance cell.
    """
    if move != Move.FORWARD:
        return cell, apply_turn(facing, move), Outcome.MOVED

    if grid.is_wall_closed(facing, cell):
        return cell, facing, Outcome.BLOCKED
    if grid.is_border(facing, cell):
        return cell, facing, Outcome.EXITED
    return grid.neighbor(facing, cell), facing, Outcome.MOVED
