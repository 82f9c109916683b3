import pygame
from typing import Optional
from maze_walker.algo.base import Generator
from maze_walker.core.direction import Direction, offset
from maze_walker.core.grid import Grid
from maze_walker.game.movement import Outcome, move_for_key
from maze_walker.game.session import Session
from maze_walker.viz.ascii import status_line

class WindowRenderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_PLAYER = (255, 215, 0) # Gold
    COLOR_CURSOR = (60, 100, 160) # Blue tint while carving

    def __init__(self, grid: Grid, cell: int = None, facing: Direction = Direction.NORTH,
                 generator: Generator = None, width=800, height=600, record=False):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height

        # Without a generator the maze is already carved and the walk starts at once
        self.session: Optional[Session] = None
        if generator is None:
            self.session = Session(grid, cell, facing)

        # Camera
        self.cell_size = 20.0
        self.offset_x = 0.0
        self.offset_y = 0.0

        from maze_walker.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.exited = False
        self.clock = None
        self.surface = None
        self.gen_iter = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Walker - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, gx, gy):
        # Bordered grid coordinates; interior starts at (1, 1)
        sx = (gx - 1) * self.cell_size + self.offset_x
        sy = (gy - 1) * self.cell_size + self.offset_y
        return sx, sy

    @property
    def generating(self) -> bool:
        return self.session is None

    def handle_key(self, key: str) -> Optional[Outcome]:
        if self.generating:
            return None
        move = move_for_key(key)
        if move is None:
            return None
        outcome = self.session.apply(move)
        if outcome == Outcome.EXITED:
            self.exited = True
            self.running = False
        return outcome

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.unicode)

    def step_generator(self):
        if self.gen_iter is None:
            self.gen_iter = self.generator.run()
        try:
            next(self.gen_iter)
        except StopIteration:
            self.session = Session(self.grid, self.generator.cursor, self.generator.facing)

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        for cell in self.grid.interior_cells():
            x, y = self.grid.index_to_xy(cell)
            px, py = (int(v) for v in self.world_to_screen(x, y))

            if self.grid.is_wall_closed(Direction.SOUTH, cell):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
            if self.grid.is_wall_closed(Direction.EAST, cell):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
            if y == 1 and self.grid.is_wall_closed(Direction.NORTH, cell):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
            if x == 1 and self.grid.is_wall_closed(Direction.WEST, cell):
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def draw_player(self, cell: int, facing: Direction, color):
        """Triangle pointing along the facing, centred in the cell."""
        x, y = self.grid.index_to_xy(cell)
        sx, sy = self.world_to_screen(x, y)
        half = self.cell_size / 2
        cx, cy = sx + half, sy + half
        dx, dy = offset(facing)
        # Perpendicular to the facing
        qx, qy = -dy, dx
        r = self.cell_size * 0.35

        tip = (cx + dx * r, cy + dy * r)
        left = (cx - dx * r + qx * r, cy - dy * r + qy * r)
        right = (cx - dx * r - qx * r, cy - dy * r - qy * r)
        pygame.draw.polygon(self.surface, color, [tip, left, right])

    def draw_hud(self):
        if self.generating:
            info = [f"Carving... {self.generator.step_count} passages"]
        else:
            info = [
                status_line(self.session.cell, self.session.facing),
                f"Moves: {self.session.moves}",
                "Walk with ijkl or wasd",
            ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def draw(self):
        self.draw_grid()
        if self.generating:
            if self.generator.cursor is not None:
                self.draw_player(self.generator.cursor, self.generator.facing, self.COLOR_CURSOR)
        else:
            self.draw_player(self.session.cell, self.session.facing, self.COLOR_PLAYER)

    def run_loop(self) -> bool:
        """Runs until the player leaves the maze or the window closes. Returns True on exit."""
        while self.running:
            self.handle_input()

            if self.generating:
                self.step_generator()

            self.draw()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
        return self.exited
