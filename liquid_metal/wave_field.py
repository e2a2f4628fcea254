"""
Wave Field
==========

This module implements the height-field membrane behind the liquid metal
surface. Every grid cell carries a height and a velocity. Each step pulls a
cell towards the average of its four neighbours (a discrete Laplacian acting
as a spring force), then damps the velocity and integrates it into the
height. It is a mass-spring membrane, not a fluid solver.

Example usage::

    from liquid_metal.wave_field import WaveField
    field = WaveField(width=200, height=200)
    field.inject_impulse(100, 100, amount=-1.5)
    for _ in range(60):
        field.step()

The outermost ring of cells is never written. It keeps zero height and zero
velocity for the lifetime of the field, so interior neighbour lookups never
leave the arrays.
"""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_STIFFNESS = 0.2
DEFAULT_DAMPING = 0.985
DEFAULT_ACTIVE_DAMPING = 0.94


class WaveField:
    """Height and velocity grids of a damped spring membrane.

    Parameters
    ----------
    width : int
        Number of grid cells in the horizontal direction.
    height : int
        Number of grid cells in the vertical direction.
    stiffness : float, optional
        Spring coefficient coupling a cell to its four neighbours.
    damping : float, optional
        Configured per-step velocity decay. Kept for reference only; `step`
        does not read it.
    active_damping : float, optional
        Per-step velocity decay that `step` actually applies.

    Notes
    -----
    Arrays have shape ``(height, width)`` and are indexed ``[y, x]``. The
    flat views `height_values` and `velocity_values` use the row-major index
    ``y * width + x``.

    Grids narrower than three cells in either direction have no interior.
    They are accepted, and every operation on them does nothing.
    """

    def __init__(self,
                 width: int,
                 height: int,
                 stiffness: float = DEFAULT_STIFFNESS,
                 damping: float = DEFAULT_DAMPING,
                 active_damping: float = DEFAULT_ACTIVE_DAMPING) -> None:
        if width < 0 or height < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got {width}x{height}.")

        self.width = width
        self.height = height
        self.stiffness = np.float32(stiffness)
        self.damping = np.float32(damping)
        self.active_damping = np.float32(active_damping)

        self.heights = np.zeros((height, width), dtype=np.float32)
        self.velocities = np.zeros((height, width), dtype=np.float32)

        if width < 3 or height < 3:
            logger.warning("Grid %dx%d has no interior cells; the simulation "
                           "will not change.", width, height)
        if self.damping != self.active_damping:
            logger.debug("Configured damping %.4f differs from applied "
                         "damping %.4f.", self.damping, self.active_damping)
        logger.debug("Created %dx%d wave field (stiffness=%.3f).",
                     width, height, self.stiffness)

    @property
    def has_interior(self) -> bool:
        return self.width >= 3 and self.height >= 3

    @property
    def height_values(self) -> np.ndarray:
        """Flat row-major view of the heights (no copy)."""
        return self.heights.reshape(-1)

    @property
    def velocity_values(self) -> np.ndarray:
        """Flat row-major view of the velocities (no copy)."""
        return self.velocities.reshape(-1)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def inject_impulse(self, center_x: int, center_y: int, amount: float,
                       radius: int = 3) -> None:
        """Push the surface around ``(center_x, center_y)``.

        Every cell of the ``(2*radius + 1)`` square around the centre gets
        ``amount * exp(-d2 * 0.5)`` added to its height, where ``d2`` is the
        squared offset from the centre. Cells outside the interior are
        skipped, so the centre may lie anywhere, even off the grid.

        Parameters
        ----------
        center_x, center_y : int
            Grid coordinates of the disturbance centre.
        amount : float
            Signed height added at the centre. Negative values depress the
            surface.
        radius : int, optional
            Half-width of the square brush. 0 touches only the centre.
        """
        if radius < 0:
            raise ValueError("Radius must be non-negative.")

        # Brush window clipped to the interior [1, dim - 2].
        x0 = max(center_x - radius, 1)
        x1 = min(center_x + radius, self.width - 2)
        y0 = max(center_y - radius, 1)
        y1 = min(center_y + radius, self.height - 2)
        if x0 > x1 or y0 > y1:
            return

        dy, dx = np.ogrid[y0 - center_y:y1 - center_y + 1,
                          x0 - center_x:x1 - center_x + 1]
        dist2 = (dx * dx + dy * dy).astype(np.float32)
        falloff = np.exp(-dist2 * np.float32(0.5))
        self.heights[y0:y1 + 1, x0:x1 + 1] += np.float32(amount) * falloff
        logger.debug("Impulse %.3f at (%d, %d) radius %d.",
                     amount, center_x, center_y, radius)

    def step(self) -> None:
        """Advance the membrane by one discrete time step.

        Phase one adds the Laplacian spring force to every interior
        velocity. Phase two damps each velocity and adds it to the height.
        Phase two starts only after phase one has finished for all cells.
        """
        if not self.has_interior:
            return

        h = self.heights
        v = self.velocities[1:-1, 1:-1]

        # Phase 1: heights are read only, so every cell sees the old field.
        laplacian = (
            h[1:-1, 0:-2] + h[1:-1, 2:] +
            h[0:-2, 1:-1] + h[2:, 1:-1] - np.float32(4.0) * h[1:-1, 1:-1]
        )
        v += laplacian * self.stiffness

        # Phase 2
        v *= self.active_damping
        h[1:-1, 1:-1] += v

    def kinetic_activity(self) -> float:
        """Sum of absolute velocities over the grid."""
        return float(np.abs(self.velocities).sum(dtype=np.float64))
