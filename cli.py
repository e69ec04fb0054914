"""
CLI interface and shared display-data computation for the
Student Loan Payment Estimator.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, List

import config as cfg
import forms
from estimator import LoanInput, LoanResult, compute


# ═══════════════════════════════════════════════════════════════════
# Formatting helpers
# ═══════════════════════════════════════════════════════════════════

def fmt(val: float, decimals: int = 0) -> str:
    """Format number as $X,XXX (negative as -$X,XXX)."""
    sign = "-" if val < 0 else ""
    return f"{sign}${abs(val):,.{decimals}f}"


def pct(val: float, decimals: int = 1) -> str:
    return f"{val:.{decimals}f}%"


# ═══════════════════════════════════════════════════════════════════
# Input collection (CLI)
# ═══════════════════════════════════════════════════════════════════

def _prompt_float(
    label: str,
    default: Any,
    min_val: float | None = None,
    max_val: float | None = None,
) -> float:
    while True:
        raw = input(f"  {label} [{default}]: ").strip()
        if not raw:
            return float(forms.strip_currency(str(default)))
        try:
            val = float(forms.strip_currency(raw).replace("%", ""))
            if min_val is not None and val < min_val:
                print(f"    Must be at least {min_val}")
                continue
            if max_val is not None and val > max_val:
                print(f"    Must be at most {max_val}")
                continue
            return val
        except ValueError:
            print("    Invalid number, try again.")


def _prompt_choice(label: str, options: list[str], default: str) -> str:
    opts = "/".join(options)
    while True:
        raw = input(f"  {label} ({opts}) [{default}]: ").strip().lower()
        if not raw:
            return default
        if raw in options:
            return raw
        print(f"    Choose from: {opts}")


def collect_inputs() -> LoanInput:
    """Prompt the user for the five loan fields."""
    print("\n  Enter your details (press Enter for defaults):\n")

    balance = _prompt_float("Loan balance", fmt(cfg.DEFAULT_BALANCE),
                            cfg.BALANCE_MIN, cfg.BALANCE_MAX)
    rate = _prompt_float("Interest rate %", cfg.DEFAULT_RATE,
                         cfg.RATE_MIN, cfg.RATE_MAX)
    term = _prompt_choice("Repayment term (years)",
                          [str(t) for t in cfg.REPAYMENT_TERMS],
                          str(cfg.DEFAULT_TERM))
    income = _prompt_choice("Income level", list(cfg.INCOME_FACTOR),
                            cfg.DEFAULT_INCOME_LEVEL)
    forgive = _prompt_choice("Include forgiveness program (e.g. PSLF)?",
                             ["yes", "no"], "yes" if cfg.DEFAULT_FORGIVENESS else "no")

    return forms.parse_form({
        "loan_balance": balance,
        "interest_rate": rate,
        "repayment_term": term,
        "income_level": income,
        "forgiveness_program": forgive,
    })


# ═══════════════════════════════════════════════════════════════════
# Shared display-data computation (used by CLI and web app)
# ═══════════════════════════════════════════════════════════════════

@dataclass
class BreakdownRow:
    label: str
    value: str
    is_total: bool = False


def breakdown_rows(inputs: LoanInput, result: LoanResult) -> List[BreakdownRow]:
    """Rows of the payment breakdown table."""
    if inputs.forgiveness_program:
        adjustment = f"-{fmt(result.forgiven_amount)}"
    else:
        adjustment = fmt(0)
    return [
        BreakdownRow("Standard Repayment", fmt(result.standard_total)),
        BreakdownRow("Forgiveness Adjustment", adjustment),
        BreakdownRow("Estimated Final Cost", fmt(result.estimated_total), is_total=True),
    ]


def compute_display_data(inputs: LoanInput, result: LoanResult) -> Dict[str, Any]:
    """Extract every value needed for the output sections."""
    monthly_saving = result.standard_monthly - result.estimated_monthly
    return {
        # Inputs echo
        "loan_balance": inputs.loan_balance,
        "interest_rate": inputs.interest_rate,
        "repayment_term": inputs.repayment_term,
        "total_payments": inputs.total_payments,
        "income_level": inputs.income_level,
        "income_label": cfg.INCOME_LABELS[inputs.income_level],
        "forgiveness": inputs.forgiveness_program,
        # Results
        "standard_monthly": result.standard_monthly,
        "standard_total": result.standard_total,
        "estimated_monthly": result.estimated_monthly,
        "estimated_total": result.estimated_total,
        "forgiven_amount": result.forgiven_amount,
        "income_based_monthly": result.income_based_monthly,
        "monthly_saving": monthly_saving,
        "standard_interest": result.standard_total - inputs.loan_balance,
        "breakdown": breakdown_rows(inputs, result),
    }


def to_json(d: Dict[str, Any]) -> Dict[str, Any]:
    """Display data with the breakdown rows flattened for JSON output."""
    out = dict(d)
    out["breakdown"] = [
        {"label": r.label, "value": r.value, "is_total": r.is_total}
        for r in d["breakdown"]
    ]
    return out


# ═══════════════════════════════════════════════════════════════════
# Box-drawing CLI output
# ═══════════════════════════════════════════════════════════════════

W = 78  # box width (characters)
H_BAR = "═"


def _box_top(title: str) -> str:
    inner = W - 2
    bar = H_BAR * inner
    return (
        f"╔{bar}╗\n"
        f"║  {title:<{inner - 2}}║\n"
        f"╠{bar}╣"
    )


def _box_line(text: str = "") -> str:
    inner = W - 4
    if len(text) > inner:
        text = text[:inner]
    return f"║  {text:<{inner}}║"


def _box_row(label: str, value: str, lw: int = 38) -> str:
    return _box_line(f"{label:<{lw}}{value}")


def _box_bottom() -> str:
    bar = H_BAR * (W - 2)
    return f"╚{bar}╝"


def _box_wrap(text: str) -> List[str]:
    """Word-wrap text into box lines."""
    rows = []
    line_len = W - 6
    line = ""
    for word in text.split():
        if len(line) + len(word) + 1 <= line_len:
            line = f"{line} {word}" if line else word
        else:
            rows.append(_box_line(line))
            line = word
    if line:
        rows.append(_box_line(line))
    return rows


def _print_section(title: str, rows: List[str]) -> None:
    """Print a titled box with content rows."""
    print(_box_top(title))
    for r in rows:
        print(r)
    print(_box_bottom())
    print()


# ═══════════════════════════════════════════════════════════════════
# CLI Section Printers
# ═══════════════════════════════════════════════════════════════════

def _print_inputs(d: Dict[str, Any]) -> None:
    rows = [
        _box_row("Loan balance", fmt(d["loan_balance"])),
        _box_row("Interest rate", pct(d["interest_rate"])),
        _box_row("Repayment term", f"{d['repayment_term']} years"),
        _box_row("Income level", d["income_label"]),
        _box_row("Forgiveness program", "Yes" if d["forgiveness"] else "No"),
    ]
    _print_section("YOUR LOAN", rows)


def _print_results(d: Dict[str, Any]) -> None:
    rows = [
        _box_row("Estimated monthly payment", fmt(d["estimated_monthly"])),
        _box_row("Total paid", fmt(d["estimated_total"])),
        _box_row("Forgiven amount", fmt(d["forgiven_amount"])),
        _box_line(),
        _box_row("Standard monthly payment", fmt(d["standard_monthly"])),
        _box_row(f"Standard total ({d['total_payments']} payments)",
                 fmt(d["standard_total"])),
    ]
    if d["forgiveness"]:
        rows.append(_box_row("Income-based monthly payment",
                             fmt(d["income_based_monthly"])))
        if d["monthly_saving"] > 0:
            rows.append(_box_row("Saving vs standard", f"{fmt(d['monthly_saving'])}/mo"))
    _print_section("ESTIMATED MONTHLY PAYMENT", rows)


def _print_breakdown(d: Dict[str, Any]) -> None:
    rows = []
    for r in d["breakdown"]:
        if r.is_total:
            rows.append(_box_line("─" * (W - 6)))
        rows.append(_box_row(r.label, r.value))
    _print_section("PAYMENT BREAKDOWN", rows)


def _print_tips() -> None:
    rows = [_box_line(f"• {tip}") for tip in cfg.REPAYMENT_TIPS]
    _print_section("REPAYMENT CONSIDERATIONS", rows)


def _print_disclaimer() -> None:
    rows = _box_wrap(cfg.DISCLAIMER)
    rows.append(_box_line())
    rows.append(_box_line("  ".join(f"• {item}" for item in cfg.FOOTER_ITEMS)))
    _print_section("DISCLAIMER", rows)


# ═══════════════════════════════════════════════════════════════════
# Main CLI entry point
# ═══════════════════════════════════════════════════════════════════

def run_cli() -> None:
    """Run the full CLI workflow."""
    # Ensure box-drawing characters render on Windows
    try:
        sys.stdout.reconfigure(encoding="utf-8")
    except (AttributeError, OSError):
        pass
    print()
    print("=" * W)
    print(f"  {cfg.PAGE_TITLE}")
    print(f"  {cfg.PAGE_SUBTITLE}")
    print("=" * W)

    inputs = collect_inputs()
    result = compute(inputs)
    d = compute_display_data(inputs, result)

    print()
    _print_inputs(d)
    _print_results(d)
    _print_breakdown(d)
    _print_tips()
    _print_disclaimer()


if __name__ == "__main__":
    run_cli()
