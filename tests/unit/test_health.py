"""Unit tests for financial health scoring"""

import pytest
from debt_planner.domain.models import Debt, FinancialSnapshot
from debt_planner.domain.health import (
    health_level,
    score_debt_ratio,
    score_diversification,
    score_emergency_fund,
    score_financial_health,
    score_savings_rate,
    score_snapshot,
)


def test_score_no_income_no_debts_no_savings():
    """Everything zero -> 0 points, Poor across the board"""
    health = score_financial_health(income=0, debts=[], savings=0, monthly_expenses=0)

    assert health.score == 0
    assert health.level == "Poor"
    assert health.max_score == 100
    assert health.breakdown["income"].status == "Poor"
    assert set(health.breakdown) == {"income", "debt", "emergency", "savings", "diversification"}
    # No income counts as a 100% debt ratio
    assert health.breakdown["debt"].score == 0
    assert health.breakdown["debt"].max == 25


def test_score_strong_finances_is_excellent():
    """
    120k/yr -> 10k/month
    debt ratio 1000/10000 = 0.10 -> 25
    emergency 60000 / 30000 = 2.0 -> 20
    savings rate (10000 - 5000 - 1000) / 10000 = 0.40 -> 20
    """
    debts = [Debt(name="Mortgage", balance=200000.0, rate=4.0, minimum_payment=1000.0)]

    health = score_financial_health(income=120000, debts=debts, savings=60000, monthly_expenses=5000)

    assert health.breakdown["income"].score == 20
    assert health.breakdown["income"].status == "Good"
    assert health.breakdown["debt"].status == "Excellent"
    assert health.breakdown["emergency"].status == "Excellent"
    assert health.breakdown["savings"].status == "Excellent"
    assert health.breakdown["diversification"].score == 10
    assert health.breakdown["diversification"].status == "Fair"
    assert health.score == 95
    assert health.level == "Excellent"


def test_score_moderate_finances_is_good():
    """
    60k/yr -> 5000/month
    debt ratio 1500/5000 = 0.30 -> 20
    emergency 5000 / 15000 = 0.33 -> 5
    savings rate (5000 - 2000 - 1500) / 5000 = 0.30 -> 20
    """
    debts = [
        Debt(name="Car", balance=12000.0, rate=7.0, minimum_payment=1000.0),
        Debt(name="Card", balance=4000.0, rate=21.0, minimum_payment=500.0),
    ]

    health = score_financial_health(income=60000, debts=debts, savings=5000, monthly_expenses=2000)

    assert health.breakdown["debt"].score == 20
    assert health.breakdown["emergency"].score == 5
    assert health.breakdown["savings"].score == 20
    assert health.score == 75
    assert health.level == "Good"


def test_score_debts_without_income_are_poor():
    debts = [Debt(name="Card", balance=1000.0, rate=20.0, minimum_payment=50.0)]

    health = score_financial_health(income=0, debts=debts, savings=0, monthly_expenses=0)

    assert health.breakdown["debt"].status == "Poor"
    assert health.breakdown["emergency"].score == 0
    assert health.breakdown["savings"].score == 0
    assert health.breakdown["diversification"].score == 0


def test_score_counts_all_debts_in_payments():
    """Monthly debt payments include every debt passed, valid or not"""
    debts = [
        Debt(name="Paid off", balance=0.0, rate=0.0, minimum_payment=1000.0),
        Debt(name="Card", balance=500.0, rate=20.0, minimum_payment=500.0),
    ]

    # 1500 / 5000 = 0.30 -> Good
    health = score_financial_health(income=60000, debts=debts, savings=0, monthly_expenses=0)

    assert health.breakdown["debt"].status == "Good"


def test_score_negative_inputs_treated_as_zero():
    health = score_financial_health(income=-5000, debts=[], savings=-10, monthly_expenses=-3)

    assert health.score == 0
    assert health.level == "Poor"


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (0.0, (25, "Excellent")),
        (0.2, (25, "Excellent")),
        (0.36, (20, "Good")),
        (0.5, (10, "Fair")),
        (0.51, (0, "Poor")),
    ],
)
def test_score_debt_ratio_bands(ratio, expected):
    assert score_debt_ratio(ratio) == expected


def test_score_emergency_fund_bands():
    assert score_emergency_fund(2.0) == (20, "Excellent")
    assert score_emergency_fund(1.0) == (15, "Good")
    assert score_emergency_fund(0.5) == (10, "Fair")
    assert score_emergency_fund(0.01) == (5, "Poor")
    assert score_emergency_fund(0.0) == (0, "Poor")


def test_score_savings_rate_bands():
    assert score_savings_rate(0.2) == (20, "Excellent")
    assert score_savings_rate(0.15) == (15, "Good")
    assert score_savings_rate(0.1) == (10, "Fair")
    assert score_savings_rate(0.05) == (5, "Poor")
    assert score_savings_rate(-0.3) == (0, "Poor")


def test_score_diversification_needs_debts_and_savings():
    assert score_diversification(True, 500.0) == (10, "Fair")
    assert score_diversification(True, 0.0) == (0, "Poor")
    assert score_diversification(False, 500.0) == (0, "Poor")


def test_health_level_thresholds():
    assert health_level(100) == "Excellent"
    assert health_level(80) == "Excellent"
    assert health_level(79) == "Good"
    assert health_level(65) == "Good"
    assert health_level(64) == "Fair"
    assert health_level(50) == "Fair"
    assert health_level(49) == "Poor"


def test_score_snapshot_matches_direct_call():
    debts = (Debt(name="Card", balance=2000.0, rate=19.0, minimum_payment=80.0),)
    snapshot = FinancialSnapshot(debts=debts, income=48000.0, savings=3000.0, monthly_expenses=1800.0)

    assert score_snapshot(snapshot) == score_financial_health(48000.0, debts, 3000.0, 1800.0)
