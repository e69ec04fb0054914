"""
Constants for the Student Loan Payment Estimator.

All monetary values in USD.  Forgiveness figures follow a simplified
PSLF-style model: 120 qualifying monthly payments over 10 years, then
most of the remaining balance is written off.
"""

# ── Repayment terms ──────────────────────────────────────────────────
REPAYMENT_TERMS = (10, 15, 20, 25)   # years
MONTHS_PER_YEAR = 12

# ── Income-driven repayment ──────────────────────────────────────────
# Share of the loan balance paid per year, keyed by income tier.
# Order matters: lowest tier first.
INCOME_FACTOR = {
    "under50k": 0.10,
    "50k-75k": 0.12,
    "75k-100k": 0.15,
    "over100k": 0.18,
}

INCOME_LABELS = {
    "under50k": "Under $50,000",
    "50k-75k": "$50,000 - $75,000",
    "75k-100k": "$75,000 - $100,000",
    "over100k": "Over $100,000",
}

# ── Forgiveness program ──────────────────────────────────────────────
FORGIVENESS_YEARS = 10
FORGIVENESS_PAYMENTS = 120          # qualifying monthly payments
FORGIVENESS_SHARE = 0.85            # share of remaining balance written off

# ── Form ranges ──────────────────────────────────────────────────────
BALANCE_MIN = 1_000
BALANCE_MAX = 500_000
BALANCE_STEP = 1_000
RATE_MIN = 0.0
RATE_MAX = 15.0
RATE_STEP = 0.1

# ── Defaults (initial page state) ────────────────────────────────────
DEFAULT_BALANCE = 45_000
DEFAULT_RATE = 6.5
DEFAULT_TERM = 10
DEFAULT_INCOME_LEVEL = "50k-75k"
DEFAULT_FORGIVENESS = False

# ── Static copy ──────────────────────────────────────────────────────
PAGE_TITLE = "Student Loan Payment Estimator (2026)"
PAGE_SUBTITLE = "Estimate monthly payments with forgiveness options"

REPAYMENT_TIPS = [
    "Standard repayment minimizes total interest",
    "Income-driven plans may lower monthly payments",
    "PSLF requires 120 qualifying payments",
    "Review options annually as income changes",
]

DISCLAIMER = (
    "This tool provides informational estimates of student loan payments "
    "using simplified assumptions. Forgiveness calculations are "
    "approximations and actual program requirements vary. The figures "
    "shown are estimates only and do not constitute student loan or legal "
    "advice. Actual payments depend on loan servicer terms, program "
    "eligibility, and federal regulations. Consult your loan servicer or a "
    "financial advisor for personalized guidance."
)

FOOTER_ITEMS = ["Estimates only", "Simplified assumptions", "Free to use"]
PRIVACY_URL = "https://scenariocalculators.com/privacy"
TERMS_URL = "https://scenariocalculators.com/terms"
COPYRIGHT = "© 2026 Student Loan Payment Estimator"

# ── Web server ───────────────────────────────────────────────────────
HOST = "127.0.0.1"
PORT = 5000
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
