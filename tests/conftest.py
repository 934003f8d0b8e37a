"""Shared test fixtures."""

import pytest

from pyxldate import Converter, SystemType


@pytest.fixture
def windows_converter():
    return Converter(SystemType.WINDOWS)


@pytest.fixture
def apple_converter():
    return Converter(SystemType.APPLE)


ALL_SYSTEMS = [
    SystemType.WINDOWS,
    SystemType.APPLE,
]
