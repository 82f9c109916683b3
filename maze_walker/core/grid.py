from array import array
from typing import Iterator, Tuple

from maze_walker.core.direction import Direction, DX, DY, turn_back


class DimensionError(ValueError):
    """Maze width or height outside the accepted range."""


class ContractError(AssertionError):
    """Raised when the grid is mutated in a way no correct caller would."""


class Grid:
    # Bitmask Constants (bit set = wall closed)
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # All walls present by default (N|E|S|W) = 15, a "whole" cell
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Sentinel for the outer ring, outside any wall mask
    BORDER = 0xFF

    MAX_DIMENSION = 100

    WALL_BITS = {
        Direction.NORTH: NORTH,
        Direction.EAST: EAST,
        Direction.SOUTH: SOUTH,
        Direction.WEST: WEST,
    }

    __slots__ = ('width', 'height', 'grid_width', 'grid_height', 'cells')

    def __init__(self, width: int, height: int):
        if not (1 <= width <= self.MAX_DIMENSION):
            raise DimensionError(f"Width {width} out of bounds (1..{self.MAX_DIMENSION})")
        if not (1 <= height <= self.MAX_DIMENSION):
            raise DimensionError(f"Height {height} out of bounds (1..{self.MAX_DIMENSION})")

        self.width = width
        self.height = height
        self.grid_width = width + 2
        self.grid_height = height + 2

        # Border ring first, then close every interior cell.
        # 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.BORDER] * (self.grid_width * self.grid_height))
        for y in range(1, height + 1):
            row = y * self.grid_width
            for x in range(1, width + 1):
                self.cells[row + x] = self.ALL_WALLS

    @property
    def cell_count(self) -> int:
        """Number of interior cells."""
        return self.width * self.height

    def cell_index(self, x: int, y: int) -> int:
        if 0 <= x < self.grid_width and 0 <= y < self.grid_height:
            return x + y * self.grid_width
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def index_to_xy(self, index: int) -> Tuple[int, int]:
        if 0 <= index < len(self.cells):
            return index % self.grid_width, index // self.grid_width
        raise IndexError(f"Cell index {index} out of bounds")

    def neighbor(self, direction: Direction, cell: int) -> int:
        index = cell + DX[direction] + DY[direction] * self.grid_width
        if not (0 <= index < len(self.cells)):
            raise IndexError(f"No neighbor {direction.name} of cell {cell}")
        return index

    def is_interior(self, cell: int) -> bool:
        return self.cells[cell] != self.BORDER

    def is_border(self, direction: Direction, cell: int) -> bool:
        return self.cells[self.neighbor(direction, cell)] == self.BORDER

    def is_wall_closed(self, direction: Direction, cell: int) -> bool:
        return (self.cells[cell] & self.WALL_BITS[direction]) != 0

    def open_wall(self, direction: Direction, cell: int):
        if not self.is_interior(cell):
            raise ContractError(f"Cell {cell} is part of the border")
        if not self.is_wall_closed(direction, cell):
            raise ContractError(f"{direction.name} wall of cell {cell} is already open")
        self.cells[cell] &= ~self.WALL_BITS[direction]

    def carve(self, direction: Direction, cell: int) -> int:
        """
        Removes the wall between 'cell' and its neighbor in 'direction'.
        Also removes the OPPOSITE wall from the neighbor. Returns the neighbor.
        """
        other = self.neighbor(direction, cell)
        self.open_wall(direction, cell)
        self.open_wall(turn_back(direction), other)
        return other

    def is_untouched(self, cell: int) -> bool:
        return self.cells[cell] == self.ALL_WALLS

    def is_untouched_neighbor(self, direction: Direction, cell: int) -> bool:
        if self.is_border(direction, cell):
            return False
        return self.is_untouched(self.neighbor(direction, cell))

    def interior_cells(self) -> Iterator[int]:
        """Yields interior cell indices row by row."""
        for y in range(1, self.height + 1):
            row = y * self.grid_width
            for x in range(1, self.width + 1):
                yield row + x
