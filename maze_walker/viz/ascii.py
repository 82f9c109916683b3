from maze_walker.core.direction import Direction, GLYPHS
from maze_walker.core.grid import Grid

# +---+---+---+
# |   |   |   |
# +---+---+---+
CORNER = "+"
WALL_NS = "---+"
NO_WALL_NS = "   +"
WALL_E = "   |"
NO_WALL_E = "    "
WALL_W = "|"
NO_WALL_W = " "


def _marker(grid: Grid, direction: Direction, x: int, y: int, wall: str, no_wall: str) -> str:
    return wall if grid.is_wall_closed(direction, grid.cell_index(x, y)) else no_wall


def render(grid: Grid, cell: int, facing: Direction) -> str:
    """
    Top-down blueprint of the maze with the player drawn as a direction glyph.
    One line for the top edge, then a row line and a separator per maze row.
    """
    px, py = grid.index_to_xy(cell)
    glyph = GLYPHS[facing]
    lines = []

    top = [CORNER]
    for x in range(1, grid.width + 1):
        top.append(_marker(grid, Direction.NORTH, x, 1, WALL_NS, NO_WALL_NS))
    lines.append("".join(top))

    for y in range(1, grid.height + 1):
        row = [_marker(grid, Direction.WEST, 1, y, WALL_W, NO_WALL_W)]
        for x in range(1, grid.width + 1):
            if (x, y) == (px, py):
                row.append(_marker(grid, Direction.EAST, x, y, f" {glyph} |", f" {glyph}  "))
            else:
                row.append(_marker(grid, Direction.EAST, x, y, WALL_E, NO_WALL_E))
        lines.append("".join(row))

        sep = [CORNER]
        for x in range(1, grid.width + 1):
            sep.append(_marker(grid, Direction.SOUTH, x, y, WALL_NS, NO_WALL_NS))
        lines.append("".join(sep))

    return "\n".join(lines)


def status_line(cell: int, facing: Direction) -> str:
    return f"Cell = {cell:4d}, Dir = {int(facing)} ({GLYPHS[facing]})"
