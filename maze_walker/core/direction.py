from enum import Enum, IntEnum
from typing import Tuple


class Direction(IntEnum):
    # Clockwise ring: one step up the ring is a right turn.
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Move(Enum):
    FORWARD = "forward"
    TURN_LEFT = "left"
    TURN_RIGHT = "right"
    TURN_BACK = "back"


# Direction Helpers
DX = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}
DY = {Direction.NORTH: -1, Direction.SOUTH: 1, Direction.EAST: 0, Direction.WEST: 0}

GLYPHS = {
    Direction.NORTH: "^",
    Direction.WEST: "<",
    Direction.SOUTH: "v",
    Direction.EAST: ">",
}

# Quarter turns applied by each relative move
TURN_STEPS = {
    Move.FORWARD: 0,
    Move.TURN_RIGHT: 1,
    Move.TURN_BACK: 2,
    Move.TURN_LEFT: 3,
}


def turn_right(direction: Direction) -> Direction:
    return Direction((direction + 1) % 4)


def turn_back(direction: Direction) -> Direction:
    return Direction((direction + 2) % 4)


def turn_left(direction: Direction) -> Direction:
    return Direction((direction + 3) % 4)


def apply_turn(direction: Direction, move: Move) -> Direction:
    """Returns the facing after a relative move. FORWARD keeps the facing."""
    return Direction((direction + TURN_STEPS[move]) % 4)


def offset(direction: Direction) -> Tuple[int, int]:
    return DX[direction], DY[direction]
