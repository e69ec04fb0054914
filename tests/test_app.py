"""Tests for the Flask routes."""

import pytest

import config as cfg
from app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_index_shows_defaults(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert cfg.PAGE_TITLE in html
    assert "$511" in html
    assert "$61,320" in html
    assert "data:image/png;base64," in html
    for tip in cfg.REPAYMENT_TIPS:
        assert tip in html
    assert cfg.PRIVACY_URL in html


def test_post_with_forgiveness(client) -> None:
    resp = client.post("/", data={
        "loan_balance": "45000",
        "interest_rate": "6.5",
        "repayment_term": "10",
        "income_level": "50k-75k",
        "forgiveness_program": "on",
    })
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "$450" in html
    assert "-$17,213" in html
    assert "$54,000" in html
    assert 'class="figure forgiven"' in html


def test_post_garbage_is_clamped(client) -> None:
    resp = client.post("/", data={"loan_balance": "lots", "interest_rate": "x"})
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    # 1000 over 120 months at 0%
    assert "$8" in html
    assert 'value="1000"' in html


def test_api_estimate(client) -> None:
    resp = client.get("/api/estimate", query_string={
        "loan_balance": "45000",
        "interest_rate": "6.5",
        "repayment_term": "10",
        "income_level": "50k-75k",
        "forgiveness_program": "on",
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["standard_monthly"] == 511
    assert body["estimated_monthly"] == 450
    assert body["estimated_total"] == 54_000
    assert body["forgiven_amount"] == 17_213
    assert body["breakdown"][1]["value"] == "-$17,213"


def test_api_estimate_zero_rate(client) -> None:
    body = client.get("/api/estimate?loan_balance=12000&interest_rate=0").get_json()
    assert body["standard_monthly"] == 100
    assert body["standard_total"] == 12_000
    assert body["forgiven_amount"] == 0
