"""Tests for formatting, display data and the terminal interface."""

import builtins

import cli
from cli import breakdown_rows, collect_inputs, compute_display_data, fmt, to_json
from estimator import LoanInput, compute
from forms import default_input


def test_fmt_whole_dollars() -> None:
    assert fmt(45_000) == "$45,000"
    assert fmt(0) == "$0"
    assert fmt(510.6) == "$511"
    assert fmt(-17_213) == "-$17,213"
    assert fmt(1234.5, 2) == "$1,234.50"


def test_breakdown_without_forgiveness(make_input) -> None:
    inputs = make_input()
    rows = breakdown_rows(inputs, compute(inputs))
    assert [r.label for r in rows] == [
        "Standard Repayment",
        "Forgiveness Adjustment",
        "Estimated Final Cost",
    ]
    assert [r.value for r in rows] == ["$61,320", "$0", "$61,320"]
    assert [r.is_total for r in rows] == [False, False, True]


def test_breakdown_with_forgiveness(make_input) -> None:
    inputs = make_input(forgiveness_program=True)
    rows = breakdown_rows(inputs, compute(inputs))
    assert [r.value for r in rows] == ["$61,320", "-$17,213", "$54,000"]


def test_display_data(make_input) -> None:
    inputs = make_input(forgiveness_program=True)
    d = compute_display_data(inputs, compute(inputs))
    assert d["income_label"] == "$50,000 - $75,000"
    assert d["monthly_saving"] == 511 - 450
    assert d["standard_interest"] == 61_320 - 45_000
    assert d["total_payments"] == 120

    payload = to_json(d)
    assert payload["breakdown"][2] == {
        "label": "Estimated Final Cost",
        "value": "$54,000",
        "is_total": True,
    }


def _answers(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(it))


def test_collect_inputs_defaults(monkeypatch) -> None:
    _answers(monkeypatch, [""] * 5)
    assert collect_inputs() == default_input()


def test_collect_inputs_reprompts_on_bad_values(monkeypatch, capsys) -> None:
    _answers(monkeypatch, [
        "$30,000",
        "abc", "99", "5",        # invalid, out of range, then valid
        "12", "15",
        "under50k",
        "yes",
    ])
    inputs = collect_inputs()
    assert inputs == LoanInput(30_000, 5.0, 15, "under50k", True)
    out = capsys.readouterr().out
    assert "Invalid number" in out
    assert "Must be at most 15.0" in out
    assert "Choose from: 10/15/20/25" in out


def test_run_cli_prints_sections(monkeypatch, capsys) -> None:
    _answers(monkeypatch, [""] * 5)
    cli.run_cli()
    out = capsys.readouterr().out
    assert "ESTIMATED MONTHLY PAYMENT" in out
    assert "PAYMENT BREAKDOWN" in out
    assert "$511" in out
    assert "$61,320" in out
    assert "PSLF requires 120 qualifying payments" in out
