"""
Pointer handling for the interactive window.

Maps display coordinates onto the simulation grid and drives the status
bar that fades in while the pointer sits still.
"""
from __future__ import annotations

from typing import Optional, Tuple


def pointer_to_cell(px: float, py: float,
                    display_size: Tuple[float, float],
                    grid_size: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    """Grid cell under a display position, or None near the edges.

    Positions are scaled from ``display_size`` to ``grid_size`` (both
    ``(width, height)``) and truncated. Cells within two of the left/top
    edge or one of the right/bottom edge are rejected.
    """
    display_w, display_h = display_size
    grid_w, grid_h = grid_size
    if display_w <= 0 or display_h <= 0:
        return None

    ix = int(px * grid_w / display_w)
    iy = int(py * grid_h / display_h)
    if 1 < ix < grid_w - 1 and 1 < iy < grid_h - 1:
        return ix, iy
    return None


class StatusOverlay:
    """Alpha of the help bar: hidden while the pointer moves, shown when idle."""

    def __init__(self, idle_seconds: float = 1.0, fade_step: int = 5) -> None:
        self.idle_seconds = idle_seconds
        self.fade_step = fade_step
        self.idle_time = 0.0
        self.alpha = 0
        self.target_alpha = 0
        self._last_pointer: Optional[Tuple[float, float]] = None

    def update(self, pointer: Tuple[float, float], frame_time: float) -> int:
        """Advance one frame and return the new alpha (0-255)."""
        if self._last_pointer is not None and pointer != self._last_pointer:
            self.idle_time = 0.0
            self.target_alpha = 0
        else:
            self.idle_time += frame_time
            if self.idle_time > self.idle_seconds:
                self.target_alpha = 255
        self._last_pointer = pointer

        if self.alpha < self.target_alpha:
            self.alpha = min(self.alpha + self.fade_step, 255)
        elif self.alpha > self.target_alpha:
            self.alpha = max(self.alpha - self.fade_step, 0)
        return self.alpha

    @property
    def visible(self) -> bool:
        return self.alpha > 0
