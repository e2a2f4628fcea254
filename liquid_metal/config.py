"""
Simulation Configuration
========================
Every knob the simulation, shading pass and demo window read at start-up,
in one frozen dataclass. Values can be overridden from a JSON file whose
keys match the field names::

    {"width": 320, "height": 180, "light_direction": [-0.4, -0.6]}
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from liquid_metal.shading import LightDirection
from liquid_metal.wave_field import (
    DEFAULT_ACTIVE_DAMPING,
    DEFAULT_DAMPING,
    DEFAULT_STIFFNESS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    # Simulation grid
    width: int = 200
    height: int = 200
    stiffness: float = DEFAULT_STIFFNESS
    damping: float = DEFAULT_DAMPING
    active_damping: float = DEFAULT_ACTIVE_DAMPING

    # Shading
    light_direction: Tuple[float, float] = (-0.4, -0.6)

    # Pointer input
    impulse_amount: float = -1.5
    impulse_radius: int = 3

    # Window
    window_width: int = 960
    window_height: int = 540
    target_fps: int = 60
    idle_seconds: float = 1.0
    fade_step: int = 5

    def light(self) -> LightDirection:
        """Light direction normalized together with its implicit z of 1."""
        return LightDirection.from_vector(*self.light_direction)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration key(s): {', '.join(unknown)}")

        values = dict(data)
        if "light_direction" in values:
            light = values["light_direction"]
            if not isinstance(light, (list, tuple)) or len(light) != 2:
                raise ValueError("light_direction must be a pair [x, y].")
            values["light_direction"] = (float(light[0]), float(light[1]))
        return replace(cls(), **values)


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Read a `SimulationConfig` from a JSON file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a JSON object.")

    config = SimulationConfig.from_dict(data)
    logger.info("Loaded configuration from %s", path)
    return config
