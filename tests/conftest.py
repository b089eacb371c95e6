"""Shared fixtures for the markup renderer tests."""

import pytest

from qrmarkup import QRMatrix, RenderOptions
from qrmarkup.module_types import IS_DARK, M_DATA, M_FINDER, M_TIMING

DARK = M_DATA | IS_DARK
LIGHT = M_DATA


@pytest.fixture
def options():
    return RenderOptions()


@pytest.fixture
def checker():
    """2x2 data checkerboard, dark on the diagonal."""
    return QRMatrix([[DARK, LIGHT], [LIGHT, DARK]])


@pytest.fixture
def mixed():
    """3x3 matrix mixing finder, timing and data modules."""
    return QRMatrix([
        [M_FINDER | IS_DARK, M_FINDER, M_DATA | IS_DARK],
        [M_TIMING | IS_DARK, M_DATA, M_TIMING],
        [M_DATA, M_DATA | IS_DARK, M_FINDER | IS_DARK],
    ])
