"""
Visualization utilities for the life game.

The renderer only ever sees the read-only view of the committed current
buffer, never a buffer that is being written.
"""

from pathlib import Path
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .grid import GridState


def cells_to_rgb(
    cells: np.ndarray,
    alive_color: tuple[float, float, float] = (0.36, 0.68, 0.22),
    dead_color: tuple[float, float, float] = (0.2, 0.2, 0.2),
) -> np.ndarray:
    """
    Convert a 0/1 grid to an RGB image.

    Row x of the grid becomes image row x, column y image column y.

    Args:
        cells: n x n array of 0/1 values
        alive_color: RGB color of live cells in [0, 1]
        dead_color: RGB color of dead cells in [0, 1]

    Returns:
        RGB image [n, n, 3] as uint8
    """
    alive = np.asarray(cells, dtype=bool)[..., np.newaxis]
    rgb = np.where(alive, np.asarray(alive_color), np.asarray(dead_color))
    return (np.clip(rgb, 0, 1) * 255).astype(np.uint8)


def state_to_rgb(state: GridState, **colors) -> np.ndarray:
    """RGB image of the committed current buffer of ``state``."""
    return cells_to_rgb(state.read_current(), **colors)


class Visualizer:
    """
    Real-time visualization manager.

    Provides live display of simulation state using matplotlib.
    """

    def __init__(
        self,
        simulation: "Simulation",  # Forward reference
        fps: int = 30,
    ):
        """
        Initialize visualizer.

        Args:
            simulation: Simulation to visualize
            fps: Target frames per second
        """
        self.sim = simulation
        self.fps = fps
        self.colors = {
            "alive_color": simulation.config.alive_color,
            "dead_color": simulation.config.dead_color,
        }

        # Setup figure
        self.fig, self.ax = plt.subplots(figsize=(6, 6))
        self.ax.set_axis_off()

        # Initialize image
        self._update_image()
        self.im = self.ax.imshow(self.current_image, interpolation="nearest")

        # Add tick counter text
        self.text = self.ax.text(
            0.02, 0.98, f"Tick: {self.sim.step_count}",
            transform=self.ax.transAxes,
            fontsize=10,
            verticalalignment='top',
            color='white',
            bbox=dict(boxstyle='round', facecolor='black', alpha=0.5)
        )

    def _update_image(self) -> None:
        """Update current image from simulation state."""
        self.current_image = state_to_rgb(self.sim.state, **self.colors)

    def _animation_update(self, frame: int) -> list:
        """Update function for animation."""
        self.sim.step()

        self._update_image()
        self.im.set_array(self.current_image)
        self.text.set_text(f"Tick: {self.sim.step_count}")

        return [self.im, self.text]

    def show_live(self, steps: Optional[int] = None) -> None:
        """
        Display live animation.

        Args:
            steps: Number of steps to run (None for infinite)
        """
        frames = steps if steps is not None else 10000
        interval = 1000 // self.fps

        anim = FuncAnimation(
            self.fig,
            self._animation_update,
            frames=frames,
            interval=interval,
            blit=True,
        )

        plt.show()

    def save_frame(self, path: str) -> None:
        """
        Save current frame as image.

        Args:
            path: Output file path
        """
        self._update_image()
        plt.imsave(path, self.current_image)

    def save_animation(
        self,
        path: str,
        steps: int = 500,
        fps: Optional[int] = None,
    ) -> None:
        """
        Save animation to file.

        Args:
            path: Output file path (mp4, gif, etc.)
            steps: Number of frames
            fps: Frames per second (uses self.fps if not provided)
        """
        if fps is None:
            fps = self.fps

        interval = 1000 // fps

        anim = FuncAnimation(
            self.fig,
            self._animation_update,
            frames=steps,
            interval=interval,
            blit=True,
        )

        # Determine writer from extension
        suffix = Path(path).suffix.lower()
        if suffix == ".gif":
            anim.save(path, writer="pillow", fps=fps)
        else:
            anim.save(path, writer="ffmpeg", fps=fps)

        print(f"Animation saved to {path}")


def save_state_image(
    state: GridState,
    output_dir: str,
    prefix: str = "frame",
    **colors,
) -> Path:
    """
    Save the current buffer as a PNG named after the tick.

    Args:
        state: Grid state
        output_dir: Output directory
        prefix: Filename prefix

    Returns:
        Path of the written image
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    path = output_path / f"{prefix}_{state.tick:06d}.png"
    plt.imsave(path, state_to_rgb(state, **colors))
    return path
