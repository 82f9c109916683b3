import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.grid import Grid
from maze_walker.algo.backtracker import BiasedBacktracker
from maze_walker.core.complexity import MazeInspector
from maze_walker.viz.ascii import render

def benchmark_size(width: int, height: int, runs: int = 5):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    gen_time = 0.0
    render_time = 0.0
    dead_ends = 0
    for seed in range(runs):
        grid = Grid(width, height)
        algo = BiasedBacktracker(grid, seed=seed)

        gen_start = time.time()
        start, facing = algo.run_all()
        gen_time += time.time() - gen_start

        if not MazeInspector.is_perfect(grid):
            raise RuntimeError(f"Seed {seed} produced an imperfect maze")

        render_start = time.time()
        render(grid, start, facing)
        render_time += time.time() - render_start

        dead_ends += MazeInspector.calculate_stats(grid)["dead_ends"]

    print(f"Generation Time: {gen_time / runs:.4f}s per maze")
    print(f"Speed: {(width*height*runs)/gen_time:,.0f} cells/sec")
    print(f"Render Time: {render_time / runs:.4f}s per frame")
    print(f"Dead Ends: {dead_ends / runs / (width*height) * 100:.1f}%")

def run_suite():
    sizes = [
        (3, 3),
        (20, 10),   # CLI default
        (50, 50),
        (100, 100), # Largest accepted maze
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
