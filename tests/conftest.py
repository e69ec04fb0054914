"""
Shared test configuration.
Puts the repository root on sys.path so the flat top-level modules import.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from estimator import LoanInput  # noqa: E402


@pytest.fixture
def make_input():
    """Build a LoanInput with the page defaults, overriding any field."""

    def _make(**overrides) -> LoanInput:
        fields = {
            "loan_balance": 45_000,
            "interest_rate": 6.5,
            "repayment_term": 10,
            "income_level": "50k-75k",
            "forgiveness_program": False,
        }
        fields.update(overrides)
        return LoanInput(**fields)

    return _make
