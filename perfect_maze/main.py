import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.kruskal import GENERATORS
from perfect_maze.algo.solvers import BFS
from perfect_maze.core.grid import Grid
from perfect_maze.core.stats import MazeStats
from perfect_maze.maze import new_maze

logger = logging.getLogger("perfect_maze")

BENCHMARK_SIZES = [10, 50, 100, 200]

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def flush():
    """Pushes the previous maze off screen."""
    print("\n" * 29)

def read_dimension(prompt: str, input_fn=input) -> int:
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            print(f"'{raw.strip()}' is not a whole number, try again.")

def run_interactive(seed=None, algo="lazy", input_fn=input):
    """Prompt for a size, show the maze, then its solution. 0 exits."""
    while True:
        rows = read_dimension("Enter the number of rows, n (0 to exit):\n> ", input_fn)
        cols = read_dimension("Enter the number of columns, m (0 to exit):\n> ", input_fn)
        if rows < 1 or cols < 1:
            return

        maze = new_maze(rows, cols, seed=seed, algo=algo)
        print("Maze is done generating!")
        print(maze.render())

        input_fn("\nPress Enter to see the solution.")
        flush()
        print("Here's how you'd solve it (Follow the '@'s).")
        print(maze.render(show_solution=True))
        print(f"\nYour solution string was :\n{maze.solve()}")

def run_generate(args):
    logger.info(f"Generating {args.rows}x{args.cols} maze with {args.algo.upper()}...")

    if args.visual:
        from perfect_maze.viz.renderer import Renderer
        grid = Grid(args.rows, args.cols)
        generator = GENERATORS[args.algo](grid, seed=args.seed)
        solver = BFS(grid) if args.solve else None
        logger.info("Visual mode enabled - Opening window...")
        renderer = Renderer(grid, generator=generator, solver=solver)
        renderer.init_window()
        renderer.run_loop()
        return

    t0 = time.time()
    maze = new_maze(args.rows, args.cols, seed=args.seed, algo=args.algo)
    logger.info(f"Generation complete in {time.time() - t0:.4f}s")

    print(maze.render(show_solution=args.solve))

    if args.solve:
        path = maze.solve()
        logger.info(f"Solution length: {len(path)}")
        print(path)

    if args.stats:
        stats = MazeStats.calculate_stats(maze.grid)
        logger.info(f"Stats: {stats}")
        logger.info(f"Perfect: {MazeStats.is_perfect(maze.grid)}")

def run_benchmark(args):
    logger.info(f"Running generator benchmark (sizes: {args.sizes})...")

    print(f"\n{'ALGORITHM':<10} | {'SIZE':<10} | {'GEN (s)':<10} | {'SOLVE (s)':<10} | {'PATH LEN':<10}")
    print("-" * 62)

    for size in args.sizes:
        for name, cls in GENERATORS.items():
            grid = Grid(size, size)
            t_start = time.time()
            cls(grid, seed=args.seed).run_all()
            gen_time = time.time() - t_start

            t_start = time.time()
            path = BFS(grid).solve()
            solve_time = time.time() - t_start

            print(f"{name:<10} | {f'{size}x{size}':<10} | {gen_time:<10.4f} | {solve_time:<10.4f} | {len(path):<10}")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Perfect Maze: random maze generator and BFS solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Interactive Command
    inter_parser = subparsers.add_parser("interactive", help="Prompt for sizes, print mazes and solutions")
    inter_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    inter_parser.add_argument("--algo", type=str, default="lazy", choices=sorted(GENERATORS), help="Generation Algorithm")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--rows", type=int, default=10, help="Maze Rows")
    gen_parser.add_argument("--cols", type=int, default=10, help="Maze Columns")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="lazy", choices=sorted(GENERATORS), help="Generation Algorithm")
    gen_parser.add_argument("--solve", action="store_true", help="Mark and print the shortest path")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor counts")
    gen_parser.add_argument("--visual", action="store_true", help="Show pygame visualization")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time the generators and the solver")
    bench_parser.add_argument("--sizes", type=int, nargs="+", default=BENCHMARK_SIZES, help="Square maze sizes")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    if args.command == "generate" and (args.rows < 1 or args.cols < 1):
        parser.error(f"--rows and --cols must be positive (got {args.rows}x{args.cols})")

    logger.info(f"Running command: {args.command}")

    if args.command == "interactive":
        run_interactive(seed=args.seed, algo=args.algo)
    elif args.command == "generate":
        run_generate(args)
    elif args.command == "benchmark":
        run_benchmark(args)

if __name__ == "__main__":
    main()
