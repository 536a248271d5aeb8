import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from delve.dungeon import generate_level  # noqa: E402

SAMPLE_SEEDS = [1, 7, 42, 1337, 2024, 31337, 292372, 730727]


@pytest.fixture(scope="session")
def sample_levels():
    """A handful of 60x45 levels shared by the invariant tests."""
    return [generate_level(60, 45, seed=s) for s in SAMPLE_SEEDS]


@pytest.fixture(scope="session")
def level_60x45():
    return generate_level(60, 45, seed=1337)
