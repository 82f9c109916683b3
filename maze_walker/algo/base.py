from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple
from maze_walker.core.direction import Direction
from maze_walker.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None):
        self.grid = grid
        self.seed = seed
        self.step_count = 0
        # Carving cursor and its facing; after run() they hold the start position
        self.cursor: Optional[int] = None
        self.facing = Direction.NORTH

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings after every change of the cursor.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> Tuple[int, Direction]:
        """Helper to run the generator to completion. Returns (start cell, start facing)."""
        for _ in self.run():
            pass
        return self.cursor, self.facing
