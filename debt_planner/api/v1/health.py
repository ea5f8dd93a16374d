"""POST /v1/health-score - financial health scoring endpoint"""

from fastapi import APIRouter, Depends

from debt_planner.api.dependencies import get_request_id
from debt_planner.api.v1.schemas import HealthScoreRequest, HealthScoreResponse, to_debts
from debt_planner.domain.health import score_financial_health
from debt_planner.infrastructure.observability.logging import log_health_score
from debt_planner.infrastructure.observability.metrics import record_health_score

router = APIRouter()


@router.post("/health-score", response_model=HealthScoreResponse)
def score_health(request_body: HealthScoreRequest, request_id: str = Depends(get_request_id)):
    """Score financial health (0-100) from annual income, debts, savings and monthly expenses"""
    health = score_financial_health(
        income=request_body.income,
        debts=to_debts(request_body.debts),
        savings=request_body.savings,
        monthly_expenses=request_body.monthly_expenses,
    )

    record_health_score(health.level)
    log_health_score(request_id, health.score, health.level)
    return HealthScoreResponse.from_score(health)
