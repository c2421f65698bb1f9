# tonelab - shared pytest fixtures
from __future__ import annotations

import pytest

from tonelab.shared.formatting import get_hex_format, set_always_shorten


@pytest.fixture(autouse=True)
def restore_hex_format():
    """Every test starts and ends with the process-wide hex format untouched."""
    previous = get_hex_format()
    yield
    set_always_shorten(previous.shorten)
