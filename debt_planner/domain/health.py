"""Financial health scoring - 0-100 score with category breakdown"""

from typing import Sequence, Tuple
from debt_planner.domain.models import CategoryScore, Debt, FinancialSnapshot, HealthScore
from debt_planner.domain.payoff import total_minimum_payment


def score_income(income: float) -> Tuple[int, str]:
    """Income stability: any income earns the full 20 points"""
    return (20, "Good") if income > 0 else (0, "Poor")


def score_debt_ratio(ratio: float) -> Tuple[int, str]:
    """
    Debt-to-income bands (monthly minimum payments / monthly income).

    - <= 20%: Excellent
    - <= 36%: Good (common lender cutoff)
    - <= 50%: Fair
    """
    if ratio <= 0.2:
        return 25, "Excellent"
    elif ratio <= 0.36:
        return 20, "Good"
    elif ratio <= 0.5:
        return 10, "Fair"
    else:
        return 0, "Poor"


def score_emergency_fund(ratio: float) -> Tuple[int, str]:
    """Emergency fund measured in multiples of three months' income"""
    if ratio >= 2:
        return 20, "Excellent"
    elif ratio >= 1:
        return 15, "Good"
    elif ratio >= 0.5:
        return 10, "Fair"
    elif ratio > 0:
        return 5, "Poor"
    else:
        return 0, "Poor"


def score_savings_rate(rate: float) -> Tuple[int, str]:
    """Share of monthly income left after expenses and debt payments"""
    if rate >= 0.2:
        return 20, "Excellent"
    elif rate >= 0.15:
        return 15, "Good"
    elif rate >= 0.1:
        return 10, "Fair"
    elif rate > 0:
        return 5, "Poor"
    else:
        return 0, "Poor"


def score_diversification(has_debts: bool, savings: float) -> Tuple[int, str]:
    """Holding both debts and savings counts as diversified"""
    # Only two tiers exist; the remaining 5 points are never awarded
    return (10, "Fair") if has_debts and savings > 0 else (0, "Poor")


def health_level(score: int) -> str:
    """Overall level: 80+ Excellent, 65+ Good, 50+ Fair"""
    if score >= 80:
        return "Excellent"
    elif score >= 65:
        return "Good"
    elif score >= 50:
        return "Fair"
    return "Poor"


def score_financial_health(
    income: float,
    debts: Sequence[Debt],
    savings: float,
    monthly_expenses: float,
) -> HealthScore:
    """
    Score financial health from 0 to 100.

    Weights:
    - 20: income (annual income > 0)
    - 25: debt-to-income ratio
    - 20: emergency fund (savings vs. 3 months of income)
    - 20: savings rate after expenses and debt payments
    - 15: diversification (debts and savings both present)

    Never raises: negative figures count as 0 and every ratio falls back
    to a fixed value when there is no income.
    """
    income = max(0.0, income)
    savings = max(0.0, savings)
    monthly_expenses = max(0.0, monthly_expenses)

    monthly_income = income / 12
    monthly_debt_payments = total_minimum_payment(debts)

    # No income counts as fully leveraged
    debt_ratio = monthly_debt_payments / monthly_income if monthly_income > 0 else 1.0
    emergency_ratio = savings / (monthly_income * 3) if monthly_income > 0 else 0.0
    savings_rate = (
        (monthly_income - monthly_expenses - monthly_debt_payments) / monthly_income
        if monthly_income > 0
        else 0.0
    )

    categories = {
        "income": (score_income(income), 20),
        "debt": (score_debt_ratio(debt_ratio), 25),
        "emergency": (score_emergency_fund(emergency_ratio), 20),
        "savings": (score_savings_rate(savings_rate), 20),
        "diversification": (score_diversification(len(debts) > 0, savings), 15),
    }

    breakdown = {
        name: CategoryScore(score=points, max=maximum, status=status)
        for name, ((points, status), maximum) in categories.items()
    }
    total = sum(category.score for category in breakdown.values())

    return HealthScore(score=total, level=health_level(total), breakdown=breakdown)


def score_snapshot(snapshot: FinancialSnapshot) -> HealthScore:
    """Score a bundled snapshot"""
    return score_financial_health(
        income=snapshot.income,
        debts=snapshot.debts,
        savings=snapshot.savings,
        monthly_expenses=snapshot.monthly_expenses,
    )
