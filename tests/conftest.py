import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import twotouch
sys.path.insert(0, str(Path(__file__).parent.parent))

from twotouch import TwoTouchConverter


@pytest.fixture(scope="session")
def converter():
    """One converter shared by the whole session; it is immutable."""
    return TwoTouchConverter()
