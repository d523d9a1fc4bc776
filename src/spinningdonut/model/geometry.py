"""
Torus Geometry & Rotation State
===============================
Value objects describing *what* is rendered and *from which orientation*.

Classes:
    GeometryError: Raised for torus constants that would break the projection.
    TorusGeometry: Tube/ring radii, projection scale and viewing offset.
    SweepResolution: Angular step sizes of the theta/phi sweep.
    RotationState: The two accumulated rotation angles (A, B).
"""
from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 2.0 * math.pi


class GeometryError(ValueError):
    """Torus constants violate the projection preconditions."""


@dataclass(frozen=True)
class TorusGeometry:
    """
    Constants of the rendered torus.

    The projection divides by ``z``. For any orientation the rotated point
    satisfies ``z >= offset - (ring_radius + tube_radius)``, so requiring
    ``offset > ring_radius + tube_radius`` keeps the reciprocal defined.
    """
    tube_radius: float = 1.0   # R1
    ring_radius: float = 2.0   # R2
    scale: float = 150.0       # K1
    offset: float = 5.0        # additive Z shift, away from the viewer

    def __post_init__(self) -> None:
        for name in ("tube_radius", "ring_radius", "scale", "offset"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise GeometryError(f"'{name}' must be a finite number, got {value}.")
        if not self.tube_radius > 0.0:
            raise GeometryError(f"Tube radius must be positive, got {self.tube_radius}.")
        if not self.ring_radius > self.tube_radius:
            raise GeometryError(
                f"Ring radius ({self.ring_radius}) must be greater than "
                f"tube radius ({self.tube_radius})."
            )
        if not self.scale > 0.0:
            raise GeometryError(f"Projection scale must be positive, got {self.scale}.")
        if not self.min_depth > 0.0:
            raise GeometryError(
                f"Offset ({self.offset}) must exceed the outer radius "
                f"({self.outer_radius}), otherwise z can reach zero."
            )

    @property
    def outer_radius(self) -> float:
        return self.ring_radius + self.tube_radius

    @property
    def min_depth(self) -> float:
        """Smallest ``z`` any rotated surface point can reach."""
        return self.offset - self.outer_radius


@dataclass(frozen=True)
class SweepResolution:
    """Angular step sizes for the theta (tube) and phi (ring) sweep."""
    theta_step: float = 0.07
    phi_step: float = 0.02

    def __post_init__(self) -> None:
        for name in ("theta_step", "phi_step"):
            step = getattr(self, name)
            if not 0.0 < step < TWO_PI:
                raise ValueError(f"'{name}' must lie in (0, 2*pi), got {step}.")


@dataclass(frozen=True)
class RotationState:
    """
    Orientation of the torus.

    Attributes:
        a: Rotation angle around the X axis in radians.
        b: Rotation angle around the Z axis in radians.
    """
    a: float = 0.0
    b: float = 0.0

    def advanced(self, delta_a: float, delta_b: float) -> RotationState:
        return RotationState(self.a + delta_a, self.b + delta_b)

    def trig(self) -> tuple[float, float, float, float]:
        """Returns ``(cosA, sinA, cosB, sinB)``."""
        return math.cos(self.a), math.sin(self.a), math.cos(self.b), math.sin(self.b)
