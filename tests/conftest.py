"""Shared test fixtures."""

from pathlib import Path

import pytest

from crc8_calculator.core.calculator import compute_crc8
from crc8_calculator.core.models import ComputationResult


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    """Path for a temporary history file (not created)."""
    return tmp_path / "state" / "history.json"


@pytest.fixture
def sample_result() -> ComputationResult:
    """A successful computation over the check string."""
    return compute_crc8("123456789", "text")
