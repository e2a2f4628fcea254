"""
Shading Pass
============

Turns a height field into an RGBA image that reads as polished chrome.

For every interior cell a surface normal is estimated from the central
height differences of its four neighbours. The normal feeds two terms:

* a Lambertian term against a fixed light, pushed through a brightness
  curve ("chrome brightness");
* a flat environment colour picked by the normal's dominant axis, a
  six-face cube approximation of a reflection rather than a real
  environment map.

The two are blended per channel and written with a fixed alpha. All
arithmetic is carried out in ``float32`` so frames are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import math
from typing import Optional, Tuple

import numpy as np

AMBIENT = np.float32(0.4)
DIFFUSE = np.float32(0.6)
BRIGHTNESS_GAMMA = np.float32(0.6)
CHROME_WEIGHT = np.float32(0.4)
ENVIRONMENT_WEIGHT = np.float32(0.6)
SURFACE_ALPHA = 180


@dataclass(frozen=True)
class LightDirection:
    """Horizontal projection of the incoming light.

    The z component is implicitly 1 while shading. Use `from_vector` to get
    the direction normalized together with that implicit z.
    """
    x: float
    y: float

    @classmethod
    def from_vector(cls, x: float, y: float) -> "LightDirection":
        length = math.sqrt(x * x + y * y + 1.0)
        return cls(x / length, y / length)


class EnvironmentFace(IntEnum):
    POS_X = 0
    NEG_X = 1
    POS_Y = 2
    NEG_Y = 3
    POS_Z = 4
    NEG_Z = 5


# Row order follows EnvironmentFace.
ENVIRONMENT_COLORS = np.array([
    (200, 180, 160, 255),  # +X
    (160, 180, 200, 255),  # -X
    (180, 200, 255, 255),  # +Y
    (40, 40, 50, 255),     # -Y
    (120, 130, 150, 255),  # +Z
    (80, 70, 60, 255),     # -Z
], dtype=np.uint8)


def surface_normals(heights: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Unit normals of the interior cells of `heights`.

    Returns the three components as arrays of shape
    ``(height - 2, width - 2)``. A zero-length candidate stays ``(0, 0, 1)``.
    """
    h = np.asarray(heights, dtype=np.float32)
    dx = h[1:-1, 2:] - h[1:-1, 0:-2]
    dy = h[2:, 1:-1] - h[0:-2, 1:-1]

    nx = -dx
    ny = -dy
    nz = np.ones_like(dx)
    length = np.sqrt(nx * nx + ny * ny + nz * nz)

    nonzero = length > 0
    nx = np.divide(nx, length, out=np.zeros_like(nx), where=nonzero)
    ny = np.divide(ny, length, out=np.zeros_like(ny), where=nonzero)
    nz = np.divide(nz, length, out=np.ones_like(nz), where=nonzero)
    return nx, ny, nz


def classify_normals(nx: np.ndarray, ny: np.ndarray, nz: np.ndarray) -> np.ndarray:
    """Pick an `EnvironmentFace` per normal by its dominant axis.

    Comparisons are strict, so a tie between axes falls through to the
    next axis in the order x, y, z. A zero component counts as negative.
    """
    ax = np.abs(nx)
    ay = np.abs(ny)
    az = np.abs(nz)

    x_dominant = (ax > ay) & (ax > az)
    y_dominant = ~x_dominant & (ay > az)

    faces = np.where(nz > 0, EnvironmentFace.POS_Z, EnvironmentFace.NEG_Z)
    faces = np.where(y_dominant,
                     np.where(ny > 0, EnvironmentFace.POS_Y, EnvironmentFace.NEG_Y),
                     faces)
    faces = np.where(x_dominant,
                     np.where(nx > 0, EnvironmentFace.POS_X, EnvironmentFace.NEG_X),
                     faces)
    return faces.astype(np.intp)


def chrome_brightness(ndotl: np.ndarray) -> np.ndarray:
    intensity = np.clip(AMBIENT + np.asarray(ndotl, dtype=np.float32) * DIFFUSE,
                        np.float32(0.0), np.float32(1.0))
    boosted = np.power(intensity, BRIGHTNESS_GAMMA)
    return (boosted * np.float32(255.0)).astype(np.uint8)


def render(heights: np.ndarray,
           light: LightDirection,
           pixels: Optional[np.ndarray] = None) -> np.ndarray:
    """Shade the interior of a height field.

    Parameters
    ----------
    heights : np.ndarray
        Height field of shape ``(height, width)``.
    light : LightDirection
        Light direction, already normalized by the caller.
    pixels : np.ndarray, optional
        ``uint8`` buffer of shape ``(height, width, 4)`` to write into. A
        fully transparent buffer is allocated when omitted.

    Returns
    -------
    np.ndarray
        The RGBA buffer. Border pixels keep whatever the caller put there.
    """
    rows, cols = heights.shape
    if pixels is None:
        pixels = np.zeros((rows, cols, 4), dtype=np.uint8)
    elif pixels.shape != (rows, cols, 4):
        raise ValueError(
            f"Pixel buffer shape {pixels.shape} does not match field "
            f"({rows}, {cols}, 4).")
    if rows < 3 or cols < 3:
        return pixels

    nx, ny, nz = surface_normals(heights)
    ndotl = nx * np.float32(light.x) + ny * np.float32(light.y) + nz
    chrome = chrome_brightness(ndotl).astype(np.float32)

    env = ENVIRONMENT_COLORS[classify_normals(nx, ny, nz)].astype(np.float32)

    interior = pixels[1:-1, 1:-1]
    blended = chrome[..., None] * CHROME_WEIGHT + env[..., :3] * ENVIRONMENT_WEIGHT
    interior[..., :3] = blended.astype(np.uint8)
    interior[..., 3] = SURFACE_ALPHA
    return pixels
