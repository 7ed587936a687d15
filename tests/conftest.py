"""Shared pytest fixtures."""

import pytest

from cadfeatures.utils import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers a CLI run attached to the root logger."""
    yield
    reset_logging()
