"""
Form parsing for the Student Loan Payment Estimator.

Turns raw form fields (web form, query string or CLI answers) into a
LoanInput.  Nothing here raises on bad input: non-numeric values become
0 and every field is then clamped into its allowed range.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

import config as cfg
from estimator import LoanInput

TRUTHY = ("on", "true", "yes", "1")


def strip_currency(s: str) -> str:
    """Remove currency symbols, commas, spaces."""
    return s.replace("$", "").replace(",", "").replace(" ", "")


def to_number(raw: Any) -> float:
    """Coerce a raw field to a float; anything non-numeric becomes 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        val = float(strip_currency(str(raw)))
    except ValueError:
        return 0.0
    return val if math.isfinite(val) else 0.0


def clamp(val: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, val))


def snap_term(years: float) -> int:
    """Nearest allowed repayment term; ties go to the shorter term."""
    return min(cfg.REPAYMENT_TERMS, key=lambda t: (abs(t - years), t))


def parse_balance(raw: Any) -> int:
    # Whole dollars only, fractional part dropped
    return int(clamp(int(to_number(raw)), cfg.BALANCE_MIN, cfg.BALANCE_MAX))


def parse_rate(raw: Any) -> float:
    return clamp(to_number(raw), cfg.RATE_MIN, cfg.RATE_MAX)


def parse_income_level(raw: Any) -> str:
    level = str(raw or "").strip().lower()
    if level in cfg.INCOME_FACTOR:
        return level
    return cfg.DEFAULT_INCOME_LEVEL


def parse_flag(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw or "").strip().lower() in TRUTHY


def default_input() -> LoanInput:
    """Initial values shown when the page first loads."""
    return LoanInput(
        loan_balance=cfg.DEFAULT_BALANCE,
        interest_rate=cfg.DEFAULT_RATE,
        repayment_term=cfg.DEFAULT_TERM,
        income_level=cfg.DEFAULT_INCOME_LEVEL,
        forgiveness_program=cfg.DEFAULT_FORGIVENESS,
    )


def parse_form(form: Mapping[str, Any]) -> LoanInput:
    """Parse submitted form fields into a LoanInput."""
    return LoanInput(
        loan_balance=parse_balance(form.get("loan_balance")),
        interest_rate=parse_rate(form.get("interest_rate")),
        repayment_term=snap_term(to_number(form.get("repayment_term"))),
        income_level=parse_income_level(form.get("income_level")),
        forgiveness_program=parse_flag(form.get("forgiveness_program")),
    )


def form_values(inputs: LoanInput) -> dict:
    """Field values for re-rendering the form from a LoanInput."""
    return {
        "loan_balance": inputs.loan_balance,
        "interest_rate": inputs.interest_rate,
        "repayment_term": inputs.repayment_term,
        "income_level": inputs.income_level,
        "forgiveness_program": inputs.forgiveness_program,
    }
