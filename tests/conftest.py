"""Shared fixtures for the sphere-flake ray tracer tests.

Scenes are kept small (low recursion levels) so the whole suite runs quickly
in pure Python.
"""

import pytest

from core.math import Vec3
from core.scene import RenderSettings
from scene_builders.sphereflake_builder import SphereFlakeBuilder, build


@pytest.fixture
def single_sphere():
    """Level-1 flake: one unit sphere centred at (0, -1, 0)."""
    return build(1, Vec3(0.0, -1.0, 0.0), 1.0)


@pytest.fixture
def small_flake():
    """Level-4 flake: 85 spheres, deep enough for nested groups."""
    return build(4, Vec3(0.0, -1.0, 0.0), 1.0)


@pytest.fixture
def eye():
    return Vec3(0.0, 0.0, -4.0)


@pytest.fixture
def tiny_settings(tmp_path):
    """Settings for an 8x8 image of a level-3 flake."""
    return RenderSettings(size=8, level=3, supersample=2, output=str(tmp_path / "image.ppm"))


@pytest.fixture
def builder():
    return SphereFlakeBuilder()
