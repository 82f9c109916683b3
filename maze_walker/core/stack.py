from array import array

from maze_walker.core.grid import ContractError


class CellStack:
    """
    Fixed-capacity LIFO of cell indices used for backtracking.

    Each cell is pushed at most once per generation run, so 'capacity' bounds
    the total number of pushes, not just the current depth.
    """

    __slots__ = ('capacity', 'cells', 'push_count')

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.cells = array('i')
        self.push_count = 0

    def push(self, cell: int):
        if self.push_count >= self.capacity:
            raise ContractError(f"More than {self.capacity} pushes in one run")
        self.cells.append(cell)
        self.push_count += 1

    def pop(self) -> int:
        if not self.cells:
            raise ContractError("Pop from empty stack")
        return self.cells.pop()

    def peek(self) -> int:
        return self.cells[-1]

    def __len__(self) -> int:
        return len(self.cells)

    def __bool__(self) -> bool:
        return len(self.cells) > 0
