"""
Frame pipeline: an advance stage followed by a shade stage.

The driver calls `frame` once per displayed frame. The advance stage
injects the optional pointer impulse and steps the field; the shade stage
then renders the settled field into the pixel buffer.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import numpy as np

from liquid_metal.config import SimulationConfig
from liquid_metal.shading import render
from liquid_metal.wave_field import WaveField

logger = logging.getLogger(__name__)

CLEAR_COLOR = (0, 0, 0, 255)


class Impulse(NamedTuple):
    x: int
    y: int
    amount: float
    radius: int = 3


class LiquidMetalPipeline:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()
        self.field = WaveField(
            self.config.width,
            self.config.height,
            stiffness=self.config.stiffness,
            damping=self.config.damping,
            active_damping=self.config.active_damping,
        )
        self.light = self.config.light()
        self.pixels = np.zeros((self.config.height, self.config.width, 4), dtype=np.uint8)
        self.frame_count = 0
        logger.info("Pipeline ready: %dx%d grid, light (%.3f, %.3f)",
                    self.config.width, self.config.height, self.light.x, self.light.y)

    def pointer_impulse(self, x: int, y: int) -> Impulse:
        """Impulse with the configured pointer amplitude and radius."""
        return Impulse(x, y, self.config.impulse_amount, self.config.impulse_radius)

    def advance(self, impulse: Optional[Impulse] = None, substeps: int = 1) -> None:
        if substeps < 0:
            raise ValueError("substeps must be non-negative.")
        if impulse is not None:
            self.field.inject_impulse(impulse.x, impulse.y, impulse.amount, impulse.radius)
        for _ in range(substeps):
            self.field.step()

    def shade(self) -> np.ndarray:
        self.pixels[...] = CLEAR_COLOR
        return render(self.field.heights, self.light, self.pixels)

    def frame(self, impulse: Optional[Impulse] = None, substeps: int = 1) -> np.ndarray:
        """Run both stages and return the freshly shaded RGBA buffer."""
        self.advance(impulse, substeps)
        self.frame_count += 1
        return self.shade()
