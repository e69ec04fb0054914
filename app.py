"""
Flask web application for the Student Loan Payment Estimator.

Single-file app using render_template_string.  Run via ``python main.py``
which starts the dev server on localhost:5000.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template_string, request

import config as cfg
import forms
import report
from cli import compute_display_data, fmt, to_json
from estimator import compute

app = Flask(__name__)
log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
# HTML Template
# ═══════════════════════════════════════════════════════════════════

HTML_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ cfg.PAGE_TITLE }}</title>
<style>
  *{margin:0;padding:0;box-sizing:border-box}

  :root{
    --space-2:.5rem;--space-3:.75rem;--space-4:1rem;--space-6:1.5rem;--space-8:2rem;
    --color-primary:#2563EB;
    --color-border:#E2E8F0;
    --color-text-primary:#0F172A;
    --color-text-secondary:#475569;
    --color-text-muted:#64748B;
    --radius-md:8px;
  }

  body{
    background:#F1F5F9;color:var(--color-text-primary);
    font-family:system-ui,-apple-system,sans-serif;line-height:1.5;
  }
  main{max-width:720px;margin:0 auto;padding:var(--space-8) var(--space-4);
       display:flex;flex-direction:column;gap:var(--space-6)}

  header{text-align:center}
  header h1{font-size:1.9rem;font-weight:800;margin-bottom:var(--space-2)}
  header p{color:var(--color-text-secondary);font-size:1.125rem}

  .card{background:#fff;border:1px solid var(--color-border);border-radius:12px;padding:var(--space-6)}
  .card.result{background:#F0F9FF;border-color:#BAE6FD}
  .card.tips{border-left:4px solid var(--color-primary)}
  .card.flush{padding:0}

  /* ── form ── */
  .form-grid{display:grid;grid-template-columns:1fr 1fr;gap:var(--space-4)}
  @media(max-width:560px){.form-grid{grid-template-columns:1fr}}
  label{display:block;font-size:.85rem;font-weight:600;color:var(--color-text-secondary);margin-bottom:.3rem}
  input[type=number],select{
    width:100%;padding:.55rem .75rem;border:1px solid var(--color-border);
    border-radius:var(--radius-md);font-size:.95rem;font-family:inherit;background:#fff;
  }
  .check{display:flex;align-items:center;gap:var(--space-3);padding:var(--space-3);
         background:#F8FAFC;border-radius:var(--radius-md);margin-top:var(--space-4)}
  .check label{margin:0;cursor:pointer}
  .btn-primary{
    margin-top:var(--space-4);width:100%;padding:.75rem;border:none;border-radius:var(--radius-md);
    background:var(--color-primary);color:#fff;font-size:1rem;font-weight:600;cursor:pointer;
  }

  /* ── results ── */
  .big{font-size:2.5rem;font-weight:800;color:var(--color-primary);line-height:1}
  .muted{font-size:.875rem;color:var(--color-text-muted);margin-top:var(--space-2)}
  .result hr{margin:var(--space-6) 0;border:none;border-top:1px solid #BAE6FD}
  .pair{display:grid;grid-template-columns:1fr 1fr;gap:var(--space-4);text-align:center}
  .pair > div + div{border-left:1px solid #BAE6FD;padding-left:var(--space-4)}
  .kicker{font-size:.75rem;color:var(--color-text-muted);font-weight:600}
  .figure{font-weight:700;font-size:1.25rem}
  .figure.forgiven{color:#16A34A}

  /* ── tips ── */
  .tips h3{font-size:1.125rem;margin-bottom:var(--space-4)}
  .tips ul{list-style:none;display:grid;gap:var(--space-3)}
  .tips li{display:flex;align-items:center;gap:var(--space-3);font-size:.9375rem;color:var(--color-text-secondary)}
  .dot{width:6px;height:6px;border-radius:50%;background:var(--color-primary);flex-shrink:0}

  /* ── breakdown ── */
  .flush h3{font-size:1rem;padding:var(--space-4) var(--space-6);border-bottom:1px solid var(--color-border)}
  table{width:100%;border-collapse:collapse;font-size:.9375rem}
  td{padding:var(--space-3) var(--space-6)}
  td.v{text-align:right;font-weight:600}
  tr{border-bottom:1px solid var(--color-border)}
  tr:last-child{border-bottom:none}
  tr.alt{background:#F8FAFC}
  tr.total{background:#F0F9FF}
  tr.total td{font-weight:600}
  tr.total td.v{color:var(--color-primary)}

  .chart-img{width:100%;border-radius:var(--radius-md);display:block}
  .chart-img + .chart-img{margin-top:var(--space-4)}

  .disclaimer{max-width:600px;margin:0 auto;font-size:.875rem;color:var(--color-text-secondary);line-height:1.6}

  footer{text-align:center;padding:var(--space-8) var(--space-4);color:var(--color-text-muted);
         border-top:1px solid var(--color-border);margin-top:var(--space-8)}
  footer ul{list-style:none;display:flex;flex-wrap:wrap;justify-content:center;gap:var(--space-4);font-size:.875rem}
  footer nav{margin-top:var(--space-4);display:flex;gap:var(--space-4);justify-content:center}
  footer nav a{color:#94A3B8;font-size:.75rem}
  footer p{margin-top:var(--space-4);font-size:.75rem}
</style>
</head>
<body>
<main>

<header>
  <h1>{{ cfg.PAGE_TITLE }}</h1>
  <p>{{ cfg.PAGE_SUBTITLE }}</p>
</header>

<!-- Input Form -->
<div class="card">
  <form method="POST" id="loan-form">
    <div class="form-grid">
      <div>
        <label for="loan_balance">Loan Balance ($)</label>
        <input id="loan_balance" type="number" name="loan_balance" value="{{ form.loan_balance }}"
               min="{{ cfg.BALANCE_MIN }}" max="{{ cfg.BALANCE_MAX }}" step="{{ cfg.BALANCE_STEP }}" placeholder="{{ cfg.DEFAULT_BALANCE }}">
      </div>
      <div>
        <label for="interest_rate">Interest Rate (%)</label>
        <input id="interest_rate" type="number" name="interest_rate" value="{{ form.interest_rate }}"
               min="{{ cfg.RATE_MIN }}" max="{{ cfg.RATE_MAX }}" step="{{ cfg.RATE_STEP }}" placeholder="{{ cfg.DEFAULT_RATE }}">
      </div>
      <div>
        <label for="repayment_term">Repayment Term</label>
        <select id="repayment_term" name="repayment_term">
          {% for t in cfg.REPAYMENT_TERMS %}
          <option value="{{ t }}" {{ 'selected' if form.repayment_term == t }}>{{ t }} years</option>
          {% endfor %}
        </select>
      </div>
      <div>
        <label for="income_level">Income Level</label>
        <select id="income_level" name="income_level">
          {% for key, label in cfg.INCOME_LABELS.items() %}
          <option value="{{ key }}" {{ 'selected' if form.income_level == key }}>{{ label }}</option>
          {% endfor %}
        </select>
      </div>
    </div>
    <div class="check">
      <input id="forgiveness_program" type="checkbox" name="forgiveness_program" value="on"
             {{ 'checked' if form.forgiveness_program }}>
      <label for="forgiveness_program">Include Forgiveness Program (e.g., PSLF)</label>
    </div>
    <button class="btn-primary" type="submit">Calculate Payment</button>
  </form>
</div>

<!-- Results -->
<div class="card result">
  <div style="text-align:center">
    <div class="kicker" style="font-size:1rem;margin-bottom:var(--space-2)">Estimated Monthly Payment</div>
    <div class="big">{{ fmt(d.estimated_monthly) }}</div>
    <div class="muted">per month</div>
  </div>
  <hr>
  <div class="pair">
    <div>
      <div class="kicker">TOTAL PAID</div>
      <div class="figure">{{ fmt(d.estimated_total) }}</div>
    </div>
    <div>
      <div class="kicker">FORGIVEN AMOUNT</div>
      <div class="figure {{ 'forgiven' if d.forgiven_amount > 0 }}">{{ fmt(d.forgiven_amount) }}</div>
    </div>
  </div>
</div>

<!-- Tips -->
<div class="card tips">
  <h3>Repayment Considerations</h3>
  <ul>
    {% for tip in cfg.REPAYMENT_TIPS %}
    <li><span class="dot"></span>{{ tip }}</li>
    {% endfor %}
  </ul>
</div>

<!-- Breakdown -->
<div class="card flush">
  <h3>Payment Breakdown</h3>
  <table>
    <tbody>
      {% for row in d.breakdown %}
      <tr class="{{ 'total' if row.is_total else ('alt' if loop.index0 % 2 else '') }}">
        <td>{{ row.label }}</td>
        <td class="v">{{ row.value }}</td>
      </tr>
      {% endfor %}
    </tbody>
  </table>
</div>

{% if charts %}
<div class="card">
  {% for img in charts %}
  <img class="chart-img" src="data:image/png;base64,{{ img }}" alt="Payment chart">
  {% endfor %}
</div>
{% endif %}

<div class="disclaimer"><p>{{ cfg.DISCLAIMER }}</p></div>

<footer>
  <ul>
    {% for item in cfg.FOOTER_ITEMS %}<li>&bull; {{ item }}</li>{% endfor %}
  </ul>
  <nav>
    <a href="{{ cfg.PRIVACY_URL }}" target="_blank" rel="noopener noreferrer">Privacy Policy</a>
    <span style="color:#64748B">|</span>
    <a href="{{ cfg.TERMS_URL }}" target="_blank" rel="noopener noreferrer">Terms of Service</a>
  </nav>
  <p>{{ cfg.COPYRIGHT }}</p>
</footer>

</main>
</body>
</html>
"""


# ═══════════════════════════════════════════════════════════════════
# Routes
# ═══════════════════════════════════════════════════════════════════

def _render(inputs):
    result = compute(inputs)
    d = compute_display_data(inputs, result)
    charts = report.get_web_charts(inputs, result)
    return render_template_string(
        HTML_TEMPLATE,
        cfg=cfg,
        form=forms.form_values(inputs),
        d=d,
        charts=charts,
        fmt=fmt,
    )


@app.route("/", methods=["GET", "POST"])
def index():
    if request.method == "GET":
        return _render(forms.default_input())

    # POST: recompute from submitted fields
    inputs = forms.parse_form(request.form.to_dict())
    log.debug("estimate requested: %s", inputs)
    return _render(inputs)


@app.route("/api/estimate")
def api_estimate():
    """JSON estimate from query-string fields (same coercion as the form)."""
    inputs = forms.parse_form(request.args.to_dict())
    result = compute(inputs)
    log.debug("api estimate: %s -> %s", inputs, result)
    return jsonify(to_json(compute_display_data(inputs, result)))


# ═══════════════════════════════════════════════════════════════════
# Entry point
# ═══════════════════════════════════════════════════════════════════

def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=cfg.LOG_FORMAT)


def run_web(debug: bool = True) -> None:
    """Start the Flask development server and open browser."""
    import webbrowser
    import threading

    configure_logging(logging.DEBUG if debug else logging.INFO)
    url = f"http://localhost:{cfg.PORT}"
    print(f"Starting web app at {url}")
    threading.Timer(1.0, lambda: webbrowser.open(url)).start()
    app.run(host=cfg.HOST, port=cfg.PORT, debug=debug)


if __name__ == "__main__":
    run_web()
