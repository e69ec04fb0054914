"""Tests for the payment engine."""

import itertools

import config as cfg
from estimator import (
    compute,
    income_based_payment,
    payment_trajectory,
    round_dollars,
)

BALANCES = [1_000, 12_000, 45_000, 120_000, 500_000]
RATES = [0.0, 2.75, 6.5, 15.0]


def test_standard_payment_amortized(make_input) -> None:
    result = compute(make_input())
    assert result.standard_monthly == 511
    assert result.standard_total == 61_320


def test_zero_rate_is_straight_line(make_input) -> None:
    result = compute(make_input(loan_balance=12_000, interest_rate=0.0))
    assert result.standard_monthly == 100
    assert result.standard_total == 12_000


def test_longer_term_lowers_monthly_raises_total(make_input) -> None:
    short = compute(make_input(repayment_term=10))
    long = compute(make_input(repayment_term=25))
    assert long.standard_monthly < short.standard_monthly
    assert long.standard_total > short.standard_total


def test_forgiveness_off_matches_standard(make_input) -> None:
    for balance, rate, term, level in itertools.product(
        BALANCES, RATES, cfg.REPAYMENT_TERMS, cfg.INCOME_FACTOR
    ):
        r = compute(make_input(loan_balance=balance, interest_rate=rate,
                               repayment_term=term, income_level=level))
        assert r.estimated_monthly == r.standard_monthly
        assert r.estimated_total == r.standard_total
        assert r.forgiven_amount == 0
        assert r.income_based_monthly == 0


def test_forgiveness_income_driven_payment(make_input) -> None:
    r = compute(make_input(forgiveness_program=True))
    assert r.income_based_monthly == 450
    assert r.estimated_monthly == 450
    assert r.estimated_total == 450 * 120
    # 45000 + 29250 accrued - 54000 paid = 20250, 85% of that is 17212.5
    assert r.forgiven_amount == 17_213


def test_forgiveness_lowest_tier(make_input) -> None:
    r = compute(make_input(income_level="under50k", forgiveness_program=True))
    assert r.estimated_monthly == 375
    assert r.estimated_total == 45_000
    assert r.forgiven_amount == 24_863


def test_forgiveness_capped_at_standard_payment(make_input) -> None:
    r = compute(make_input(income_level="over100k", forgiveness_program=True))
    assert r.income_based_monthly == 675
    assert r.estimated_monthly == r.standard_monthly == 511
    assert r.estimated_total == 511 * 120


def test_forgiveness_zero_rate_nothing_left(make_input) -> None:
    r = compute(make_input(loan_balance=12_000, interest_rate=0.0,
                           income_level="under50k", forgiveness_program=True))
    assert r.estimated_monthly == 100
    assert r.forgiven_amount == 0


def test_forgiveness_never_raises_payment(make_input) -> None:
    for balance, rate, term, level in itertools.product(
        BALANCES, RATES, cfg.REPAYMENT_TERMS, cfg.INCOME_FACTOR
    ):
        r = compute(make_input(loan_balance=balance, interest_rate=rate,
                               repayment_term=term, income_level=level,
                               forgiveness_program=True))
        assert r.estimated_monthly <= r.standard_monthly
        assert r.forgiven_amount >= 0


def test_income_tiers_monotonic() -> None:
    levels = list(cfg.INCOME_FACTOR)
    for balance in BALANCES:
        payments = [income_based_payment(balance, lvl) for lvl in levels]
        assert payments == sorted(payments)


def test_round_dollars_halves_up() -> None:
    assert round_dollars(17_212.5) == 17_213
    assert round_dollars(2.5) == 3
    assert round_dollars(2.49) == 2
    assert round_dollars(0.0) == 0


def test_trajectory_ends_at_totals(make_input) -> None:
    inputs = make_input(repayment_term=25)
    result = compute(inputs)
    traj = payment_trajectory(inputs, result)
    assert len(traj.months) == 301
    assert traj.standard[0] == 0
    assert traj.standard[-1] == result.standard_total
    assert traj.estimated[-1] == result.estimated_total


def test_trajectory_flat_after_forgiveness(make_input) -> None:
    inputs = make_input(repayment_term=20, income_level="under50k",
                        forgiveness_program=True)
    result = compute(inputs)
    traj = payment_trajectory(inputs, result)
    window = cfg.FORGIVENESS_PAYMENTS
    assert traj.estimated[window] == result.estimated_total
    assert (traj.estimated[window:] == result.estimated_total).all()
    assert traj.estimated[-1] < traj.standard[-1]
