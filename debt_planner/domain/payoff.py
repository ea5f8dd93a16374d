"""Debt payoff simulation engine - avalanche and snowball amortization"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence
from debt_planner.domain.models import Debt, DebtPayoff, SimulationResult, Strategy, StrategyComparison
from debt_planner.utils.money import round_cents

MAX_MONTHS = 600  # 50 years
RECOMMENDED_EXTRA_RATIO = 0.2


@dataclass
class _WorkingDebt:
    """Mutable per-simulation state for one debt"""

    debt: Debt
    balance: float
    interest: float = 0.0
    months_to_payoff: int = 0


def is_valid_debt(debt: Debt) -> bool:
    """A debt takes part in simulation only with positive balance and payment and a non-negative rate"""
    return debt.balance > 0 and debt.rate >= 0 and debt.minimum_payment > 0


def valid_debts(debts: Iterable[Debt]) -> List[Debt]:
    """Drop inert entries, keeping the caller's order"""
    return [debt for debt in debts if is_valid_debt(debt)]


def order_debts(debts: Sequence[Debt], strategy: Strategy) -> List[Debt]:
    """
    Order debts for extra-payment targeting.

    Avalanche: descending interest rate. Snowball: ascending balance.
    Ties keep their original relative order (stable sort, no secondary key).
    """
    strategy = Strategy(strategy)
    if strategy is Strategy.AVALANCHE:
        return sorted(debts, key=lambda d: -d.rate)
    return sorted(debts, key=lambda d: d.balance)


def total_minimum_payment(debts: Iterable[Debt]) -> float:
    """Sum of minimum payments across every debt supplied"""
    return sum(debt.minimum_payment for debt in debts)


def minimum_only_cost(debts: Iterable[Debt]) -> float:
    """
    Closed-form cost of paying only minimums on each valid debt independently.

    months = balance / payment                              (0% rate)
    months = ln(1 + balance * r / payment) / ln(1 + r)      (r = monthly rate)
    cost   = sum(payment * months)
    """
    total = 0.0
    for debt in valid_debts(debts):
        monthly_rate = debt.rate / 100 / 12
        if monthly_rate == 0:
            months = debt.balance / debt.minimum_payment
        else:
            months = math.log(1 + debt.balance * monthly_rate / debt.minimum_payment) / math.log(1 + monthly_rate)
        total += debt.minimum_payment * months
    return total


def monthly_savings(baseline: float, total_paid: float, total_months: int) -> float:
    """Average monthly saving versus the minimum-only baseline, floored at zero"""
    return max(0.0, (baseline - total_paid) / max(1, total_months))


def _empty_result(strategy: Strategy) -> SimulationResult:
    return SimulationResult(
        strategy=strategy,
        total_months=0,
        total_interest=0.0,
        total_paid=0.0,
        payoff_plan=(),
        monthly_savings=0.0,
    )


def _settle(working: _WorkingDebt, month: int) -> None:
    # Floor at zero and stamp the payoff month the first time the balance clears
    if working.balance <= 0:
        working.balance = 0.0
        working.months_to_payoff = month


def simulate(
    debts: Sequence[Debt],
    extra_payment: float = 0.0,
    strategy: Strategy = Strategy.AVALANCHE,
) -> SimulationResult:
    """
    Simulate month-by-month payoff of a debt set under a greedy strategy.

    Requirements:
    - Invalid debts are filtered out; none left -> zero result
    - Each month every open debt accrues balance * rate / 100 / 12 interest
      and receives its minimum payment (principal part may be negative when
      interest exceeds the payment; the balance then grows)
    - The whole extra payment then goes to the first open debt in strategy order
    - Stops when all balances clear or after MAX_MONTHS periods
    - Monetary outputs are rounded to cents

    The cap is a liveness guard, not an error: a capped result carries
    total_months == MAX_MONTHS and remaining_balance > 0.
    """
    strategy = Strategy(strategy)
    candidates = valid_debts(debts)
    if not candidates:
        return _empty_result(strategy)

    extra_payment = max(0.0, extra_payment)
    working = [_WorkingDebt(debt=debt, balance=debt.balance) for debt in order_debts(candidates, strategy)]

    total_interest = 0.0
    total_paid = 0.0
    month = 0

    while month < MAX_MONTHS and any(w.balance > 0 for w in working):
        month += 1

        # Minimum payments on every open debt
        for w in working:
            if w.balance <= 0:
                continue
            interest = (w.balance * w.debt.rate / 100) / 12
            principal = min(w.debt.minimum_payment - interest, w.balance)

            w.balance -= principal
            w.interest += interest
            total_interest += interest
            total_paid += w.debt.minimum_payment
            _settle(w, month)

        # Extra payment goes to the first open debt only; leftovers are not carried over
        if extra_payment > 0:
            target = next((w for w in working if w.balance > 0), None)
            if target is not None:
                applied = min(extra_payment, target.balance)
                target.balance -= applied
                total_paid += applied
                _settle(target, month)

    savings = monthly_savings(minimum_only_cost(candidates), total_paid, month)
    remaining = sum(w.balance for w in working if w.balance > 0)

    return SimulationResult(
        strategy=strategy,
        total_months=month,
        total_interest=round_cents(total_interest),
        total_paid=round_cents(total_paid),
        payoff_plan=tuple(
            DebtPayoff(
                name=w.debt.name,
                original_balance=w.debt.balance,
                months_to_payoff=w.months_to_payoff,
                total_interest=round_cents(w.interest),
            )
            for w in working
        ),
        monthly_savings=round_cents(savings),
        remaining_balance=round_cents(remaining),
    )


def compare_strategies(debts: Sequence[Debt], extra_payment: float = 0.0) -> StrategyComparison:
    """Run both strategies on the same inputs; the cheaper one in interest is recommended (ties -> avalanche)"""
    avalanche = simulate(debts, extra_payment, Strategy.AVALANCHE)
    snowball = simulate(debts, extra_payment, Strategy.SNOWBALL)

    recommended = Strategy.SNOWBALL if snowball.total_interest < avalanche.total_interest else Strategy.AVALANCHE

    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        interest_difference=round_cents(snowball.total_interest - avalanche.total_interest),
        recommended=recommended,
    )


def recommended_extra_payment(
    income: float,
    debts: Sequence[Debt],
    ratio: float = RECOMMENDED_EXTRA_RATIO,
) -> float:
    """Suggested extra payment: a share of monthly income left after minimums (income is annual)"""
    available = income / 12 - total_minimum_payment(debts)
    return round_cents(max(0.0, available * ratio))
