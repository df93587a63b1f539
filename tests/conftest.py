"""
Test configuration — ensures repo root is in sys.path + shared event fixtures.

This allows tests to import swimlane without installing it.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import swimlane.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tests.fixtures import make_event, sample_events  # noqa: E402


@pytest.fixture
def event():
    """Factory: event(id, start_day, end_day) with days offset from 2021-01-01."""
    return make_event


@pytest.fixture
def timeline_events():
    """The pinned sample timeline."""
    return sample_events()
