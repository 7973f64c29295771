"""
Command-line interface for the life-game simulation.

Usage:
    python -m lifegame.main --help
    python -m lifegame.main --steps 1000 --visualize
    python -m lifegame.main --grid-size 256 --tick-period 100 --realtime
    python -m lifegame.main --pattern glider --grid-size 32 --save-frames output/
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import mlx.core as mx

from .config import Config
from .errors import ConfigurationError
from .metrics import compute_all_metrics, population, print_metrics_summary
from .patterns import PATTERNS, place_pattern
from .simulation import Simulation
from .visualization import Visualizer, save_state_image


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="Life Game - double-buffered B3/S23 cellular automaton",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Basic options
    parser.add_argument(
        "--steps", type=int, default=1000,
        help="Number of simulation steps"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Grid options
    parser.add_argument(
        "--grid-size", type=int, default=128, dest="grid_size",
        help="Grid width and height"
    )
    parser.add_argument(
        "--probability", type=float, default=None, dest="seed_probability",
        help="Probability that a seeded cell starts alive"
    )
    parser.add_argument(
        "--pattern", type=str, default=None, choices=sorted(PATTERNS),
        help="Start from a named pattern instead of a random grid"
    )

    # Scheduling options
    parser.add_argument(
        "--tick-period", type=float, default=None, dest="tick_period_ms",
        help="Milliseconds between ticks in --realtime mode"
    )
    parser.add_argument(
        "--tile-size", type=int, default=None, dest="tile_size",
        help="Side of the square tiles a step is split into"
    )
    parser.add_argument(
        "--realtime", action="store_true",
        help="Pace steps by the tick period instead of running flat out"
    )

    # Visualization options
    parser.add_argument(
        "--visualize", action="store_true",
        help="Show live visualization"
    )
    parser.add_argument(
        "--fps", type=int, default=30,
        help="Frames per second for visualization"
    )
    parser.add_argument(
        "--save-frames", type=str, default=None,
        help="Directory to save frame images"
    )
    parser.add_argument(
        "--save-interval", type=int, default=100,
        help="Save frame every N steps"
    )
    parser.add_argument(
        "--save-animation", type=str, default=None,
        help="Path to save animation (mp4 or gif)"
    )

    # Analysis options
    parser.add_argument(
        "--print-metrics", action="store_true",
        help="Print all metrics at end"
    )
    parser.add_argument(
        "--save-metrics", type=str, default=None,
        help="Save metrics to JSON file"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
        initial_state = None
        if args.pattern is not None:
            initial_state = place_pattern(config.grid_size, args.pattern)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print("Life Game Simulation")
    print(f"  Grid: {config.grid_size}x{config.grid_size}")
    print(f"  Steps: {args.steps}")
    if args.pattern is not None:
        print(f"  Seed: {args.pattern}")
    else:
        print(f"  Seed: {args.seed if args.seed is not None else 'random'}")
    print()

    # Check MLX device
    print(f"MLX device: {mx.default_device()}")
    print()

    # Create simulation
    sim = Simulation(config, seed=args.seed, initial_state=initial_state)

    # Visualization mode
    if args.visualize:
        viz = Visualizer(sim, fps=args.fps)
        viz.show_live(steps=args.steps)
        return 0

    # Save animation mode
    if args.save_animation:
        viz = Visualizer(sim, fps=args.fps)
        viz.save_animation(args.save_animation, steps=args.steps)
        return 0

    # Frame saving callback
    frame_callback = None
    if args.save_frames:
        output_dir = Path(args.save_frames)
        output_dir.mkdir(parents=True, exist_ok=True)
        colors = {"alive_color": config.alive_color, "dead_color": config.dead_color}

        def frame_callback(s: Simulation) -> None:
            save_state_image(s.state, str(output_dir), "frame", **colors)
            print(f"  Saved frame at tick {s.step_count} (population {population(s.state)})")

    # Run simulation
    print("Running simulation...")
    if args.realtime:
        def realtime_callback(s: Simulation) -> None:
            if frame_callback is not None and s.step_count % args.save_interval == 0:
                frame_callback(s)

        try:
            sim.run_realtime(max_steps=args.steps, callback=realtime_callback)
        except KeyboardInterrupt:
            sim.stop()
            print(f"Interrupted at tick {sim.step_count}")
    else:
        sim.run(
            args.steps,
            callback=frame_callback,
            callback_interval=args.save_interval,
            show_progress=True,
        )

    # Final analysis
    print()

    if args.print_metrics:
        metrics = compute_all_metrics(sim.state)
        print_metrics_summary(metrics)

    if args.save_metrics:
        metrics = compute_all_metrics(sim.state)
        with open(args.save_metrics, "w") as f:
            json.dump(metrics, f, indent=2)
        print(f"Metrics saved to {args.save_metrics}")

    print("Simulation complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
