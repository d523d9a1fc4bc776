"""
Surface Sampler & Projector
===========================
Pure numerical core: sweeps the torus parameter space, rotates every point,
projects it onto the screen and shades it with a fixed directional light.

All functions are free of hidden state; identical inputs give identical
outputs. Arrays are laid out theta-major, phi-minor, which is also the order
in which samples overwrite each other in the frame buffer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, TYPE_CHECKING

import numpy as np

from spinningdonut.model.geometry import TWO_PI, RotationState, SweepResolution, TorusGeometry

if TYPE_CHECKING:
    import numpy.typing as npt


class Sample(NamedTuple):
    """A single shaded pixel."""
    x: int
    y: int
    intensity: int


@dataclass
class ProjectedSurface:
    """
    Float screen coordinates and raw brightness for every sweep point.

    Nothing is truncated, clamped or bounds-checked yet.
    """
    screen_x: npt.NDArray[np.float64]
    screen_y: npt.NDArray[np.float64]
    depth: npt.NDArray[np.float64]
    brightness: npt.NDArray[np.float64]


@dataclass
class SampleBatch:
    """
    In-bounds samples of one sweep, as parallel arrays in sweep order.
    """
    xs: npt.NDArray[np.int64]
    ys: npt.NDArray[np.int64]
    intensities: npt.NDArray[np.uint8]

    def __len__(self) -> int:
        return int(self.xs.shape[0])

    def __iter__(self) -> Iterator[Sample]:
        for x, y, i in zip(self.xs.tolist(), self.ys.tolist(), self.intensities.tolist()):
            yield Sample(x, y, i)

    @classmethod
    def empty(cls) -> SampleBatch:
        return cls(
            xs=np.empty(0, dtype=np.int64),
            ys=np.empty(0, dtype=np.int64),
            intensities=np.empty(0, dtype=np.uint8),
        )

    @classmethod
    def concatenate(cls, batches: list[SampleBatch]) -> SampleBatch:
        """Joins batches, keeping their order."""
        if not batches:
            return cls.empty()
        return cls(
            xs=np.concatenate([b.xs for b in batches]),
            ys=np.concatenate([b.ys for b in batches]),
            intensities=np.concatenate([b.intensities for b in batches]),
        )


# -------------------------------------------------------------------------------
# Building blocks
# -------------------------------------------------------------------------------

def sweep_angles(resolution: SweepResolution) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    The two bounded parameter ranges, each covering [0, 2*pi).

    Returns:
        ``(thetas, phis)``
    """
    thetas = np.arange(0.0, TWO_PI, resolution.theta_step)
    phis = np.arange(0.0, TWO_PI, resolution.phi_step)
    return thetas, phis


def circle_point(theta, geometry: TorusGeometry):
    """Point on the tube cross-section circle before any rotation."""
    circle_x = geometry.ring_radius + geometry.tube_radius * np.cos(theta)
    circle_y = geometry.tube_radius * np.sin(theta)
    return circle_x, circle_y


def rotate_point(theta, phi, rotation: RotationState, geometry: TorusGeometry):
    """
    Sweeps the circle point around the ring by ``phi`` and applies the
    (A, B) rotation. The returned ``z`` already includes the viewing offset.

    Accepts scalars or broadcastable arrays for ``theta`` and ``phi``.
    """
    cos_a, sin_a, cos_b, sin_b = rotation.trig()
    cos_phi, sin_phi = np.cos(phi), np.sin(phi)
    circle_x, circle_y = circle_point(theta, geometry)

    x = circle_x * (cos_b * cos_phi + sin_a * sin_b * sin_phi) - circle_y * cos_a * sin_b
    y = circle_x * (sin_b * cos_phi - sin_a * cos_b * sin_phi) + circle_y * cos_a * cos_b
    z = cos_a * circle_x * sin_phi + circle_y * sin_a + geometry.offset
    return x, y, z


def surface_brightness(theta, phi, rotation: RotationState):
    """
    Dot product of the rotated surface normal with the fixed light vector,
    expanded into sines and cosines. The result is signed and not clamped.
    """
    cos_a, sin_a, cos_b, sin_b = rotation.trig()
    cos_theta, sin_theta = np.cos(theta), np.sin(theta)
    cos_phi, sin_phi = np.cos(phi), np.sin(phi)

    return (
        cos_phi * cos_theta * sin_b
        - cos_a * cos_theta * sin_phi
        - sin_a * sin_theta
        + cos_b * (cos_a * sin_theta - cos_theta * sin_a * sin_phi)
    )


def brightness_to_intensity(brightness) -> npt.NDArray[np.uint8]:
    """
    Clamps brightness to [0, 1] and scales it to 0..255.

    Surfaces facing away from the light end up black instead of being culled.
    Rounding is half-to-even.
    """
    clamped = np.clip(np.asarray(brightness, dtype=np.float64), 0.0, 1.0)
    return np.rint(clamped * 255.0).astype(np.uint8)


# -------------------------------------------------------------------------------
# Sweep
# -------------------------------------------------------------------------------

def project_surface(
    rotation: RotationState,
    geometry: TorusGeometry,
    width: int,
    height: int,
    resolution: SweepResolution,
    thetas: Optional[npt.NDArray[np.float64]] = None,
) -> ProjectedSurface:
    """
    Projects every (theta, phi) point of the sweep onto the screen.

    Args:
        rotation: Current orientation.
        geometry: Torus constants.
        width: Screen width in pixels.
        height: Screen height in pixels.
        resolution: Angular steps of the sweep.
        thetas: Optional subset of theta values to sweep instead of the
            full range (used for chunked sweeps).

    Returns:
        Flat arrays ordered theta-major, phi-minor.
    """
    full_thetas, phis = sweep_angles(resolution)
    if thetas is None:
        thetas = full_thetas

    theta_grid = thetas[:, np.newaxis]
    phi_grid = phis[np.newaxis, :]

    x, y, z = rotate_point(theta_grid, phi_grid, rotation, geometry)
    brightness = surface_brightness(theta_grid, phi_grid, rotation)

    with np.errstate(divide="ignore", invalid="ignore"):
        inv_z = 1.0 / z
        screen_x = width / 2 + geometry.scale * inv_z * x
        screen_y = height / 2 - geometry.scale * inv_z * y

    return ProjectedSurface(
        screen_x=screen_x.ravel(),
        screen_y=screen_y.ravel(),
        depth=z.ravel(),
        brightness=brightness.ravel(),
    )


def sample_torus(
    rotation: RotationState,
    geometry: TorusGeometry,
    width: int,
    height: int,
    resolution: SweepResolution,
    thetas: Optional[npt.NDArray[np.float64]] = None,
) -> SampleBatch:
    """
    Produces the shaded, in-bounds pixel samples of the torus.

    Coordinates are truncated toward zero. Points outside the screen are
    dropped silently. So is any point with ``z <= 0``, which valid geometry
    never produces.
    """
    projected = project_surface(rotation, geometry, width, height, resolution, thetas=thetas)

    in_front = projected.depth > 0.0
    xs = np.trunc(np.where(in_front, projected.screen_x, -1.0)).astype(np.int64)
    ys = np.trunc(np.where(in_front, projected.screen_y, -1.0)).astype(np.int64)

    visible = in_front & (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)

    return SampleBatch(
        xs=xs[visible],
        ys=ys[visible],
        intensities=brightness_to_intensity(projected.brightness[visible]),
    )
