"""
Simulation driver for the life game.

Owns the grid state and the step scheduler and calls ``step()`` once per
tick, either as fast as possible (``run``) or paced by the configured tick
period (``run_realtime``).
"""

import threading
import time
from typing import Callable, Optional

from tqdm import tqdm

from .config import Config
from .errors import ConfigurationError
from .grid import GridState, SeedSource, initialize
from .scheduler import StepScheduler
from .seeding import random_seed_source


class Simulation:
    """
    Life-game simulation manager.

    Handles state evolution and provides hooks for visualization/analysis.

    Attributes:
        config: Simulation configuration
        state: Current grid state
        scheduler: Step scheduler advancing the state
        seed: Seed for the default random seed source
    """

    def __init__(
        self,
        config: Config,
        seed: Optional[int] = None,
        initial_state: Optional[GridState] = None,
        seed_source: Optional[SeedSource] = None,
    ):
        """
        Initialize simulation.

        Args:
            config: Simulation configuration
            seed: Random seed for reproducibility
            initial_state: Optional pre-initialized state
            seed_source: Optional cell sampler used instead of the random default
        """
        self.config = config
        self.seed = seed
        self.scheduler = StepScheduler(config.tile_size)
        self._stop_event = threading.Event()

        if initial_state is not None:
            if initial_state.size != config.grid_size:
                raise ConfigurationError(
                    f"initial_state has size {initial_state.size}, "
                    f"config expects {config.grid_size}"
                )
            self.state = initial_state
        else:
            self.state = initialize(
                config.grid_size,
                seed_source or random_seed_source(config.seed_probability, seed),
            )

        # Tick-0 cells, restored by reset()
        self._initial_cells = self.state.read_current()

    @property
    def step_count(self) -> int:
        """Number of committed steps."""
        return self.state.tick

    @property
    def running(self) -> bool:
        return not self._stop_event.is_set()

    def step(self) -> None:
        """Advance simulation by one tick."""
        self.scheduler.step(self.state)

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["Simulation"], None]] = None,
        callback_interval: int = 100,
        show_progress: bool = True,
    ) -> None:
        """
        Run simulation for multiple steps.

        Args:
            steps: Number of steps to run
            callback: Optional function called periodically
            callback_interval: How often to call callback
            show_progress: Whether to show progress bar
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Simulating")

        for i in iterator:
            self.step()

            if callback is not None and (i + 1) % callback_interval == 0:
                callback(self)

    def run_realtime(
        self,
        max_steps: Optional[int] = None,
        callback: Optional[Callable[["Simulation"], None]] = None,
    ) -> int:
        """
        Step once per tick period until stopped.

        ``stop()`` (from a callback or another thread) takes effect at the
        next tick boundary; a step in progress always completes or fails as
        a whole.

        Args:
            max_steps: Stop after this many steps (None for no limit)
            callback: Called after every committed step, e.g. to draw a frame

        Returns:
            Number of steps taken
        """
        self._stop_event.clear()
        period = self.config.tick_period_s
        taken = 0

        while not self._stop_event.is_set():
            if max_steps is not None and taken >= max_steps:
                break

            started = time.monotonic()
            self.step()
            taken += 1

            if callback is not None:
                callback(self)

            remaining = period - (time.monotonic() - started)
            if remaining > 0:
                self._stop_event.wait(remaining)

        return taken

    def stop(self) -> None:
        """Request ``run_realtime`` to return at the next tick boundary."""
        self._stop_event.set()

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset simulation to its initial state.

        Args:
            seed: Reseed the grid randomly with this seed (None restores the
                original tick-0 cells)
        """
        if seed is not None:
            self.seed = seed
            self.state = initialize(
                self.config.grid_size,
                random_seed_source(self.config.seed_probability, seed),
            )
            self._initial_cells = self.state.read_current()
        else:
            self.state = GridState.from_cells(self._initial_cells)

    def get_state_dict(self) -> dict:
        """Get serializable snapshot of the current tick."""
        return {
            "step_count": self.step_count,
            "seed": self.seed,
            "config": self.config.to_dict(),
            "cells": self.state.read_current().tolist(),
        }
