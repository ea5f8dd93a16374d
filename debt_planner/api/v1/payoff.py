"""POST /v1/payoff/* - debt payoff simulation endpoints"""

import time
from fastapi import APIRouter, Depends

from debt_planner.api.dependencies import get_request_id
from debt_planner.api.v1.schemas import (
    CompareRequest,
    ComparisonResponse,
    SimulateRequest,
    SimulationResponse,
    to_debts,
)
from debt_planner.config import settings
from debt_planner.domain.models import SimulationResult
from debt_planner.domain.payoff import compare_strategies, recommended_extra_payment, simulate
from debt_planner.infrastructure.observability.logging import log_simulation
from debt_planner.infrastructure.observability.metrics import record_simulation

router = APIRouter()


def observe_simulation(result: SimulationResult, request_id: str, debt_count: int, start_time: float) -> None:
    """Emit metrics and a structured log line for one simulation"""
    duration_ms = (time.perf_counter() - start_time) * 1000
    capped = result.remaining_balance > 0
    record_simulation(result.strategy.value, result.total_months, result.remaining_balance)
    log_simulation(request_id, result.strategy.value, debt_count, result.total_months, capped, duration_ms)


@router.post("/payoff/simulate", response_model=SimulationResponse)
def simulate_payoff(request_body: SimulateRequest, request_id: str = Depends(get_request_id)):
    """
    Simulate month-by-month payoff under one strategy.

    Invalid debts (non-positive balance or payment, negative rate) are
    ignored rather than rejected.
    """
    start_time = time.perf_counter()
    debts = to_debts(request_body.debts)

    result = simulate(debts, request_body.extra_payment, request_body.strategy)

    observe_simulation(result, request_id, len(debts), start_time)
    return SimulationResponse.from_result(result)


@router.post("/payoff/compare", response_model=ComparisonResponse)
def compare_payoff(request_body: CompareRequest, request_id: str = Depends(get_request_id)):
    """
    Run avalanche and snowball side by side.

    When annual income is supplied, also suggests an extra payment of
    a configured share of the income left after minimum payments.
    """
    start_time = time.perf_counter()
    debts = to_debts(request_body.debts)

    comparison = compare_strategies(debts, request_body.extra_payment)

    suggestion = None
    if request_body.income is not None:
        suggestion = recommended_extra_payment(request_body.income, debts, settings.recommended_extra_ratio)

    observe_simulation(comparison.avalanche, request_id, len(debts), start_time)
    observe_simulation(comparison.snowball, request_id, len(debts), start_time)
    return ComparisonResponse.from_comparison(comparison, suggestion)
