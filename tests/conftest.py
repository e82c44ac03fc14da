"""Shared fixtures for Detective Quest tests."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def output():
    """Buffer capturing everything printed to the game console."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Plain console writing to the output buffer."""
    return Console(file=output, width=200, force_terminal=False, color_system=None)
