"""Interactive 2D wave simulation shaded as a liquid metal surface."""
from liquid_metal.config import SimulationConfig, load_config
from liquid_metal.pipeline import Impulse, LiquidMetalPipeline
from liquid_metal.shading import EnvironmentFace, LightDirection, render
from liquid_metal.wave_field import WaveField

__all__ = [
    "EnvironmentFace",
    "Impulse",
    "LightDirection",
    "LiquidMetalPipeline",
    "SimulationConfig",
    "WaveField",
    "load_config",
    "render",
]
