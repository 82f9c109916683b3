import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.complexity import MazeInspector, popcount_walls
from maze_walker.core.direction import Direction, turn_back
from maze_walker.core.grid import Grid, DimensionError
from maze_walker.algo.backtracker import BiasedBacktracker, generate

class TestGenerators(unittest.TestCase):
    def test_perfect_maze(self):
        for w, h in [(1, 1), (1, 6), (6, 1), (3, 3), (20, 10), (37, 23), (100, 100)]:
            grid, start, facing = generate(w, h, seed=w * 1000 + h)

            self.assertEqual(MazeInspector.count_passages(grid), w * h - 1, f"{w}x{h} passage count")
            self.assertEqual(len(MazeInspector.border_openings(grid)), 1, f"{w}x{h} entrances")
            reached = MazeInspector.reachable_cells(grid, start)
            self.assertEqual(len(reached), w * h, f"{w}x{h} should be fully connected")
            self.assertTrue(MazeInspector.is_perfect(grid))

    def test_every_cell_pushed_once(self):
        for w, h in [(1, 1), (1, 6), (3, 3), (20, 10), (100, 100)]:
            grid = Grid(w, h)
            algo = BiasedBacktracker(grid, seed=w + h)
            algo.run_all()
            # Entrance plus one push per carve fills the stack capacity exactly
            self.assertEqual(algo.stack.push_count, grid.cell_count, f"{w}x{h} pushes")
            self.assertEqual(algo.stack.push_count, algo.step_count + 1)
            self.assertEqual(len(algo.stack), 0)

    def test_unseeded_run_is_perfect(self):
        grid, _, _ = generate(12, 9)
        self.assertTrue(MazeInspector.is_perfect(grid))

    def test_three_by_three(self):
        grid, start, _ = generate(3, 3, seed=3)
        self.assertEqual(grid.grid_width, 5)
        self.assertEqual(MazeInspector.count_passages(grid), 8)
        (cell, direction), = MazeInspector.border_openings(grid)
        self.assertTrue(grid.is_border(direction, cell))
        self.assertTrue(grid.is_interior(start))

    def test_cell_states_during_generation(self):
        grid = Grid(8, 6)
        algo = BiasedBacktracker(grid, seed=5)
        interior = set(grid.interior_cells())
        for _ in algo.run():
            for i, val in enumerate(grid.cells):
                if i in interior:
                    self.assertLessEqual(val, Grid.ALL_WALLS)
                else:
                    self.assertEqual(val, Grid.BORDER)
            self.assertTrue(grid.is_interior(algo.cursor))

    def test_start_position(self):
        grid = Grid(15, 15)
        start, facing = BiasedBacktracker(grid, seed=21).run_all()
        # The walk starts in the last cell carved: a dead end entered from behind
        self.assertEqual(popcount_walls(grid.cells[start]), 3)
        self.assertFalse(grid.is_wall_closed(turn_back(facing), start))

    def test_single_cell(self):
        grid, start, facing = generate(1, 1, seed=0)
        self.assertEqual(start, grid.cell_index(1, 1))
        # Only the entrance is open, right behind the player
        self.assertEqual(MazeInspector.border_openings(grid), [(start, turn_back(facing))])

    def test_determinism(self):
        grid1, start1, facing1 = generate(10, 10, seed=12345)

        grid2 = Grid(10, 10)
        rec = BiasedBacktracker(grid2, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())
        self.assertEqual((start1, facing1), (rec.cursor, rec.facing))

    def test_dimension_errors(self):
        for w, h in [(0, 3), (3, 0), (101, 3), (-4, -4)]:
            with self.assertRaises(DimensionError):
                generate(w, h)

    def test_first_guess_bias(self):
        # From the centre of a fresh 3x3 grid every neighbor is untouched,
        # so the returned direction is always the first guess.
        grid = Grid(3, 3)
        algo = BiasedBacktracker(grid)
        center = grid.cell_index(2, 2)
        rng = random.Random(99)
        counts = {d: 0 for d in Direction}
        trials = 4000
        for _ in range(trials):
            counts[algo.find_untouched(rng, center, Direction.NORTH)] += 1

        self.assertEqual(counts[Direction.SOUTH], 0, "Never starts by turning back")
        self.assertAlmostEqual(counts[Direction.NORTH] / trials, 0.5, delta=0.05)
        self.assertAlmostEqual(counts[Direction.WEST] / trials, 0.25, delta=0.05)
        self.assertAlmostEqual(counts[Direction.EAST] / trials, 0.25, delta=0.05)

    def test_sweep_finds_only_neighbor(self):
        grid = Grid(3, 1)
        algo = BiasedBacktracker(grid)
        left = grid.cell_index(1, 1)
        rng = random.Random(7)
        # The only untouched neighbor lies behind the facing
        for _ in range(50):
            self.assertEqual(algo.find_untouched(rng, left, Direction.WEST), Direction.EAST)

    def test_no_untouched_neighbor(self):
        grid = Grid(1, 1)
        algo = BiasedBacktracker(grid)
        self.assertIsNone(algo.find_untouched(random.Random(1), grid.cell_index(1, 1), Direction.NORTH))

    def test_entrance_on_outer_edge(self):
        for seed in range(40):
            grid = Grid(6, 4)
            cell, facing = BiasedBacktracker(grid, seed=seed).open_entrance(random.Random(seed))
            self.assertTrue(grid.is_border(turn_back(facing), cell))
            self.assertFalse(grid.is_wall_closed(turn_back(facing), cell))

if __name__ == '__main__':
    unittest.main()
