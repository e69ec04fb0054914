"""
Chart rendering for the Student Loan Payment Estimator.

Provides base64-encoded PNG charts for web embedding (get_web_charts):
  - Cumulative amount paid, standard plan vs estimated plan
  - Monthly payment comparison (standard / income-based / estimated)
"""

from __future__ import annotations

import base64
import io
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import numpy as np

import config as cfg
from estimator import LoanInput, LoanResult, payment_trajectory

# ═══════════════════════════════════════════════════════════════════
# Style constants
# ═══════════════════════════════════════════════════════════════════

BG = "#FFFFFF"
CARD = "#F8FAFC"
TEXT = "#0F172A"
TEXT2 = "#475569"
PRIMARY = "#2563EB"
GREEN = "#16A34A"
SLATE = "#94A3B8"
BORDER = "#E2E8F0"

WEB_W, WEB_H = 10, 5.5


# ═══════════════════════════════════════════════════════════════════
# Axis formatters
# ═══════════════════════════════════════════════════════════════════

def _usd_fmt(x, _):
    if abs(x) >= 1e6:
        return f"${x / 1e6:.1f}M"
    if abs(x) >= 1e3:
        return f"${x / 1e3:.0f}k"
    return f"${x:.0f}"


USD_FMT = FuncFormatter(_usd_fmt)


# ═══════════════════════════════════════════════════════════════════
# Style helpers
# ═══════════════════════════════════════════════════════════════════

def _style(fig, *axes):
    """Apply light theme to figure and all axes."""
    fig.patch.set_facecolor(BG)
    for ax in axes:
        ax.set_facecolor(CARD)
        ax.tick_params(colors=TEXT2, labelsize=8)
        ax.xaxis.label.set_color(TEXT2)
        ax.yaxis.label.set_color(TEXT2)
        ax.title.set_color(TEXT)
        for spine in ax.spines.values():
            spine.set_color(BORDER)
        ax.grid(True, alpha=0.4, color=BORDER)


def _legend(ax, loc="upper left"):
    ax.legend(loc=loc, fontsize=8, facecolor=BG, edgecolor=BORDER, labelcolor=TEXT)


# ═══════════════════════════════════════════════════════════════════
# Charts
# ═══════════════════════════════════════════════════════════════════

def _chart_cumulative(inputs: LoanInput, result: LoanResult,
                      figsize=(WEB_W, WEB_H)) -> plt.Figure:
    """Cumulative amount paid over the term for both plans."""
    traj = payment_trajectory(inputs, result)
    years = traj.months / cfg.MONTHS_PER_YEAR

    fig, ax = plt.subplots(figsize=figsize)
    _style(fig, ax)

    ax.plot(years, traj.standard, color=SLATE, linewidth=2.0,
            label=f"Standard ({inputs.repayment_term} years)")
    if inputs.forgiveness_program:
        ax.plot(years, traj.estimated, color=PRIMARY, linewidth=2.4,
                label="Income-driven + forgiveness")
        ax.axvline(cfg.FORGIVENESS_YEARS, color=GREEN, linewidth=1.2,
                   linestyle="--", alpha=0.8)
        if result.forgiven_amount > 0:
            ax.annotate(
                f"{_usd_fmt(result.forgiven_amount, None)} forgiven",
                (cfg.FORGIVENESS_YEARS, traj.estimated[-1]),
                textcoords="offset points", xytext=(6, -14),
                fontsize=8, color=GREEN, fontweight="bold",
            )

    ax.fill_between(years, traj.estimated, traj.standard,
                    where=traj.standard >= traj.estimated,
                    color=PRIMARY, alpha=0.08)
    ax.yaxis.set_major_formatter(USD_FMT)
    ax.set_xlim(0, inputs.repayment_term)
    ax.set_ylim(bottom=0)
    ax.set_xlabel("Years")
    ax.set_ylabel("Total paid")
    ax.set_title("Cumulative Payments", fontsize=11, fontweight="bold")
    _legend(ax)
    fig.tight_layout()
    return fig


def _chart_monthly(inputs: LoanInput, result: LoanResult,
                   figsize=(WEB_W, WEB_H - 1.5)) -> plt.Figure:
    """Horizontal bars comparing the monthly payment options."""
    labels = ["Standard"]
    values = [result.standard_monthly]
    colors = [SLATE]
    if inputs.forgiveness_program:
        labels.append("Income-based")
        values.append(result.income_based_monthly)
        colors.append(TEXT2)
    labels.append("Estimated")
    values.append(result.estimated_monthly)
    colors.append(PRIMARY)

    fig, ax = plt.subplots(figsize=figsize)
    _style(fig, ax)
    y = np.arange(len(labels))
    ax.barh(y, values, color=colors, height=0.55)
    for yi, v in zip(y, values):
        ax.text(v, yi, f"  ${v:,.0f}", va="center", fontsize=8, color=TEXT)
    ax.set_yticks(y)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()
    ax.xaxis.set_major_formatter(USD_FMT)
    ax.set_xlim(0, max(values + [1]) * 1.2)
    ax.set_title("Monthly Payment", fontsize=11, fontweight="bold")
    fig.tight_layout()
    return fig


# ═══════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════

def figure_to_base64(fig: plt.Figure) -> str:
    """Convert a matplotlib figure to a base64-encoded PNG string."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=fig.get_facecolor(),
                dpi=120, bbox_inches="tight")
    buf.seek(0)
    b64 = base64.b64encode(buf.read()).decode()
    buf.close()
    return b64


def get_web_charts(inputs: LoanInput, result: LoanResult) -> List[str]:
    """Return base64-encoded PNG chart images for web embedding.

    Returns 2 charts:
      [0] Cumulative payments
      [1] Monthly payment comparison
    """
    chart_figs = [
        _chart_cumulative(inputs, result),
        _chart_monthly(inputs, result),
    ]

    images = [figure_to_base64(f) for f in chart_figs]
    for f in chart_figs:
        plt.close(f)
    return images
