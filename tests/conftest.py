"""Pytest configuration for repository-relative imports."""

import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def rng():
    """Seeded generator so randomized tests are reproducible."""
    return np.random.default_rng(20240501)
