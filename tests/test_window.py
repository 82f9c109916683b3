import unittest
import sys
import os
import tempfile

# Headless SDL; must be set before pygame initializes a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.algo.backtracker import BiasedBacktracker, generate
from maze_walker.core.direction import Direction
from maze_walker.core.grid import Grid
from maze_walker.game.movement import Outcome
from maze_walker.viz.window import WindowRenderer

class TestWindow(unittest.TestCase):
    def create_corridor(self):
        grid = Grid(2, 1)
        left = grid.cell_index(1, 1)
        grid.open_wall(Direction.WEST, left)
        grid.carve(Direction.EAST, left)
        return grid

    def test_keys_drive_session(self):
        grid = self.create_corridor()
        renderer = WindowRenderer(grid, grid.cell_index(2, 1), Direction.EAST)

        self.assertIsNone(renderer.handle_key("q"))
        self.assertEqual(renderer.handle_key("i"), Outcome.BLOCKED)
        self.assertEqual(renderer.handle_key("s"), Outcome.MOVED)
        self.assertEqual(renderer.handle_key("w"), Outcome.MOVED)
        self.assertTrue(renderer.running)

        self.assertEqual(renderer.handle_key("w"), Outcome.EXITED)
        self.assertFalse(renderer.running)
        self.assertTrue(renderer.exited)

    def test_generation_then_walk(self):
        grid = Grid(6, 4)
        renderer = WindowRenderer(grid, generator=BiasedBacktracker(grid, seed=3))
        self.assertTrue(renderer.generating)
        self.assertIsNone(renderer.handle_key("i"))

        for _ in range(10000):
            if not renderer.generating:
                break
            renderer.step_generator()

        _, start, facing = generate(6, 4, seed=3)
        self.assertFalse(renderer.generating)
        self.assertEqual((renderer.session.cell, renderer.session.facing), (start, facing))

    def test_draw_player(self):
        grid, start, facing = generate(5, 5, seed=9)
        renderer = WindowRenderer(grid, start, facing, width=240, height=240)
        renderer.surface = pygame.Surface((240, 240))
        renderer.fit_to_screen()
        renderer.draw()

        x, y = grid.index_to_xy(start)
        sx, sy = renderer.world_to_screen(x, y)
        half = renderer.cell_size / 2
        color = renderer.surface.get_at((int(sx + half), int(sy + half)))
        self.assertEqual(tuple(color)[:3], WindowRenderer.COLOR_PLAYER)

    def test_fit_to_screen(self):
        grid = Grid(20, 10)
        renderer = WindowRenderer(grid, grid.cell_index(1, 1), Direction.NORTH, width=800, height=600)
        renderer.fit_to_screen()
        self.assertAlmostEqual(renderer.cell_size, 36.0)
        # Interior (1,1) maps to the padded top-left corner
        self.assertEqual(renderer.world_to_screen(1, 1), (renderer.offset_x, renderer.offset_y))
        self.assertAlmostEqual(renderer.offset_x, 40.0)

class TestRecorder(unittest.TestCase):
    def test_idle_frames_dropped(self):
        from maze_walker.viz.recorder import VideoRecorder

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "clips", "walk.mp4")
            recorder = VideoRecorder(active=True, output_file=path, hold_seconds=0.1)
            surface = pygame.Surface((64, 48))

            self.assertTrue(recorder.capture_frame(surface))
            self.assertFalse(recorder.capture_frame(surface))
            surface.fill((255, 0, 0))
            self.assertTrue(recorder.capture_frame(surface))
            recorder.stop()

            self.assertEqual((recorder.frame_count, recorder.skipped), (2, 1))
            self.assertTrue(os.path.exists(path))

    def test_inactive(self):
        from maze_walker.viz.recorder import VideoRecorder
        recorder = VideoRecorder(active=False)
        self.assertFalse(recorder.capture_frame(pygame.Surface((8, 8))))
        recorder.stop()
        self.assertIsNone(recorder.output_file)

if __name__ == '__main__':
    unittest.main()
