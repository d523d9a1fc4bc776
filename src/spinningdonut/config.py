"""
Configuration & Constants
=========================
This module is the central registry of render constants.

Why is this file needed?
------------------------
1. Abstraction: Screen size, torus radii, sweep resolution and animation speed
   live here instead of being scattered across the renderer.
2. Validation: `RenderSettings` rejects inconsistent values at construction,
   so the render loop itself never has to check anything.

Exports:
    SCREEN_WIDTH, SCREEN_HEIGHT (int): Default buffer size in pixels.
    TICK_INTERVAL_MS (int): Default timer interval of the viewer.
    DELTA_A, DELTA_B (float): Rotation increments per tick (radians).
    BLACK, Color: Default background colour and the RGB triple type.
    RenderSettings: Bundle of all of the above.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from spinningdonut.model.geometry import SweepResolution, TorusGeometry

# Global Constants
SCREEN_WIDTH: int = 400
SCREEN_HEIGHT: int = 400
TICK_INTERVAL_MS: int = 30  # ~33 fps
DELTA_A: float = 0.04
DELTA_B: float = 0.02

WINDOW_TITLE: str = "Spinning Donut"

Color = tuple[int, int, int]
BLACK: Color = (0, 0, 0)


def validate_color(color: Color) -> Color:
    """Checks an RGB triple and returns it as a plain tuple of ints."""
    if len(color) != 3:
        raise ValueError(f"Expected an RGB triple, got {color!r}.")
    if any(not 0 <= int(c) <= 255 for c in color):
        raise ValueError(f"Color components must lie in 0..255, got {color!r}.")
    return int(color[0]), int(color[1]), int(color[2])


@dataclass(frozen=True)
class RenderSettings:
    """Everything a FrameRenderer and its viewer need to know."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    geometry: TorusGeometry = field(default_factory=TorusGeometry)
    resolution: SweepResolution = field(default_factory=SweepResolution)
    delta_a: float = DELTA_A
    delta_b: float = DELTA_B
    background: Color = BLACK
    tick_interval_ms: int = TICK_INTERVAL_MS
    workers: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive, got {self.width}x{self.height}.")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_interval_ms} ms.")
        if self.workers < 1:
            raise ValueError(f"At least one worker is required, got {self.workers}.")
        if not (math.isfinite(self.delta_a) and math.isfinite(self.delta_b)):
            raise ValueError(f"Rotation increments must be finite, got ({self.delta_a}, {self.delta_b}).")
        object.__setattr__(self, "background", validate_color(self.background))
