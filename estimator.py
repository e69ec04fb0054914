"""
Payment engine for the Student Loan Payment Estimator.

Computes the standard amortized payment for a loan and, when the
forgiveness program is selected, an income-driven payment with a
simplified 10-year forgiveness adjustment.

compute() is pure: the same LoanInput always yields the same LoanResult.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

import config as cfg


# ─── Data Classes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoanInput:
    """User inputs for one calculation (already sanitised by the form layer)."""

    loan_balance: float          # principal, USD
    interest_rate: float         # nominal annual rate in percent (6.5 = 6.5%)
    repayment_term: int          # years, one of cfg.REPAYMENT_TERMS
    income_level: str            # key of cfg.INCOME_FACTOR
    forgiveness_program: bool    # income-driven + forgiveness path

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 100 / cfg.MONTHS_PER_YEAR

    @property
    def total_payments(self) -> int:
        return self.repayment_term * cfg.MONTHS_PER_YEAR


@dataclass(frozen=True)
class LoanResult:
    """Derived payment figures. All values are whole dollars."""

    standard_monthly: int
    standard_total: int
    estimated_monthly: int
    estimated_total: int
    forgiven_amount: int
    income_based_monthly: int = 0   # 0 when the forgiveness path is off


@dataclass
class Trajectory:
    """Cumulative amount paid by month for both plans."""

    months: np.ndarray = field(repr=False)      # 0 .. total_payments
    standard: np.ndarray = field(repr=False)    # same length as months
    estimated: np.ndarray = field(repr=False)   # flat after forgiveness


# ─── Rounding ────────────────────────────────────────────────────────

def round_dollars(value: float) -> int:
    """Round to the nearest whole dollar, halves rounding up.

    Python's round() uses banker's rounding (17212.5 -> 17212); the
    displayed figures need 17212.5 -> 17213.
    """
    return int(math.floor(value + 0.5))


# ─── Payment Calculations ────────────────────────────────────────────

def standard_monthly_payment(inputs: LoanInput) -> int:
    """Level monthly payment from the amortization formula.

        M = P * r(1+r)^n / ((1+r)^n - 1)

    A zero rate falls back to straight-line repayment.
    """
    r = inputs.monthly_rate
    n = inputs.total_payments
    if r > 0:
        growth = (1 + r) ** n
        return round_dollars(inputs.loan_balance * r * growth / (growth - 1))
    return round_dollars(inputs.loan_balance / n)


def income_based_payment(loan_balance: float, income_level: str) -> int:
    """Monthly payment for the income tier."""
    factor = cfg.INCOME_FACTOR[income_level]
    return round_dollars(loan_balance * factor / cfg.MONTHS_PER_YEAR)


def compute(inputs: LoanInput) -> LoanResult:
    """Compute standard and estimated payments for one set of inputs."""
    standard_monthly = standard_monthly_payment(inputs)
    standard_total = standard_monthly * inputs.total_payments

    if not inputs.forgiveness_program:
        return LoanResult(
            standard_monthly=standard_monthly,
            standard_total=standard_total,
            estimated_monthly=standard_monthly,
            estimated_total=standard_total,
            forgiven_amount=0,
        )

    income_monthly = income_based_payment(inputs.loan_balance, inputs.income_level)
    estimated_monthly = min(standard_monthly, income_monthly)

    paid_before_forgiveness = estimated_monthly * cfg.FORGIVENESS_PAYMENTS
    # Simple interest over the forgiveness window, not true amortization
    accrued = inputs.loan_balance * (inputs.interest_rate / 100) * cfg.FORGIVENESS_YEARS
    remaining = max(0.0, inputs.loan_balance + accrued - paid_before_forgiveness)

    return LoanResult(
        standard_monthly=standard_monthly,
        standard_total=standard_total,
        estimated_monthly=estimated_monthly,
        estimated_total=paid_before_forgiveness,
        forgiven_amount=round_dollars(remaining * cfg.FORGIVENESS_SHARE),
        income_based_monthly=income_monthly,
    )


# ─── Trajectories (charts) ───────────────────────────────────────────

def payment_trajectory(inputs: LoanInput, result: LoanResult) -> Trajectory:
    """Cumulative payments month by month for the standard and estimated plans.

    Under the forgiveness program payments stop after the qualifying
    window, so the estimated curve goes flat from there.
    """
    n = inputs.total_payments
    months = np.arange(n + 1)

    standard = months * result.standard_monthly

    if inputs.forgiveness_program:
        paying = np.minimum(months, cfg.FORGIVENESS_PAYMENTS)
    else:
        paying = months
    estimated = paying * result.estimated_monthly

    return Trajectory(months=months, standard=standard, estimated=estimated)
