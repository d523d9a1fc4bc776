import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from spinningdonut.config import RenderSettings
from spinningdonut.model.geometry import SweepResolution


@pytest.fixture
def small_settings() -> RenderSettings:
    """Small screen and coarse sweep, cheap enough for many frames."""
    return RenderSettings(
        width=80,
        height=60,
        resolution=SweepResolution(theta_step=0.2, phi_step=0.1),
    )
