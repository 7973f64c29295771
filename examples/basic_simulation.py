#!/usr/bin/env python3
"""
Basic life-game simulation example.

This script demonstrates:
1. Creating a simulation with custom parameters
2. Running the simulation
3. Measuring population dynamics
4. Checking a known oscillator
"""

import mlx.core as mx

from lifegame import Config
from lifegame.simulation import Simulation
from lifegame.metrics import compute_all_metrics, print_metrics_summary, population, transitions
from lifegame.patterns import place_pattern
from lifegame.grid import live_cells


def main():
    print("=" * 60)
    print("Life Game")
    print("Basic Simulation Example")
    print("=" * 60)
    print()

    # Check MLX device
    print(f"MLX device: {mx.default_device()}")
    print()

    # Create configuration
    config = Config(
        grid_size=64,          # Smaller grid for quick demo
        seed_probability=0.5,  # Reference seeding density
        tick_period_ms=100.0,  # Only used by run_realtime
        tile_size=16,          # Reference workgroup size
    )

    print("Configuration:")
    print(f"  Grid: {config.grid_size}x{config.grid_size}")
    print(f"  Seed probability: {config.seed_probability}")
    print()

    # Create simulation
    sim = Simulation(config, seed=42)

    print("Initial state:")
    print(f"  Population: {population(sim.state)}")
    print()

    print("Running simulation for 500 steps...")

    def progress_callback(s: Simulation):
        t = transitions(s.state)
        print(f"  Tick {s.step_count}: population={population(s.state)}, "
              f"births={t['births']}, deaths={t['deaths']}")

    sim.run(
        steps=500,
        callback=progress_callback,
        callback_interval=100,
        show_progress=True,
    )
    print()

    print("Final state:")
    print_metrics_summary(compute_all_metrics(sim.state))

    # Oscillator check
    print("=" * 60)
    print("Blinker check:")
    print("=" * 60)
    blinker = Simulation(Config(grid_size=6), initial_state=place_pattern(6, "blinker", origin=(2, 1)))
    for _ in range(2):
        print(f"  Tick {blinker.step_count}: {sorted(live_cells(blinker.state))}")
        blinker.step()
    print(f"  Tick {blinker.step_count}: {sorted(live_cells(blinker.state))}")
    print()

    print("To visualize, run:")
    print("  python -m lifegame.main --visualize --steps 5000")
    print()


if __name__ == "__main__":
    main()
