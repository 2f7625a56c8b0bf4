"""
Pytest configuration: make sure `import dmv` works regardless of
where pytest is invoked, and provide the shared facility / vehicle
fixtures used across the test modules.
"""

import sys
from pathlib import Path

import pytest

# /path/to/project/tests -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dmv.facility import Facility  # noqa: E402
from dmv.models import Engine, Vehicle  # noqa: E402


@pytest.fixture
def albany():
    return Facility("Albany DMV Office", "2242 Santiam Hwy SE Albany OR 97321", "541-967-2014")


@pytest.fixture
def ashland():
    return Facility("Ashland DMV Office", "600 Tolman Creek Rd Ashland OR 97520", "541-776-6092")


@pytest.fixture
def cruz():
    return Vehicle("123456789abcdefgh", 2012, "Chevrolet", "Cruz", Engine.ICE)


@pytest.fixture
def bolt():
    return Vehicle("987654321abcdefgh", 2019, "Chevrolet", "Bolt", Engine.EV)


@pytest.fixture
def camaro():
    return Vehicle("1a2b3c4d5e6f", 1969, "Chevrolet", "Camaro", Engine.ICE)
