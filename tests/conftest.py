"""Make the top-level modules importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from icg import ICG  # noqa: E402

REFERENCE_PRIME = 15485863


@pytest.fixture
def reference_icg():
    return ICG(REFERENCE_PRIME, 213, 64, 1)
