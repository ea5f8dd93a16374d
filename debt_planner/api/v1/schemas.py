"""Pydantic schemas for API request/response validation"""

from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator

from debt_planner.domain.models import (
    Debt,
    HealthScore,
    SimulationResult,
    Strategy,
    StrategyComparison,
)
from debt_planner.domain.payoff import MAX_MONTHS
from debt_planner.utils.money import coerce_amount


class DebtSchema(BaseModel):
    """Debt entry; unparseable amounts become 0 so the entry is skipped by the simulator"""

    name: str = ""
    balance: float = 0.0
    rate: float = Field(0.0, description="Annual percentage rate, e.g. 18.99")
    minimum_payment: float = Field(0.0, validation_alias=AliasChoices("minimum_payment", "minimumPayment"))
    type: str = "other"

    @field_validator("balance", "rate", "minimum_payment", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> float:
        return coerce_amount(value)

    def to_domain(self) -> Debt:
        return Debt(
            name=self.name,
            balance=self.balance,
            rate=self.rate,
            minimum_payment=self.minimum_payment,
            type=self.type,
        )


def to_debts(debts: List[DebtSchema]) -> List[Debt]:
    return [debt.to_domain() for debt in debts]


class SimulateRequest(BaseModel):
    """Request body for POST /v1/payoff/simulate"""

    debts: List[DebtSchema] = Field(default_factory=list)
    extra_payment: float = Field(0.0, ge=0, description="Extra monthly payment on top of minimums")
    strategy: Strategy = Strategy.AVALANCHE


class CompareRequest(BaseModel):
    """Request body for POST /v1/payoff/compare"""

    debts: List[DebtSchema] = Field(default_factory=list)
    extra_payment: float = Field(0.0, ge=0)
    income: Optional[float] = Field(None, ge=0, description="Annual income, enables the extra payment suggestion")


class HealthScoreRequest(BaseModel):
    """Request body for POST /v1/health-score"""

    income: float = Field(0.0, ge=0, description="Annual income")
    debts: List[DebtSchema] = Field(default_factory=list)
    savings: float = Field(0.0, ge=0)
    monthly_expenses: float = Field(0.0, ge=0)


class DebtPayoffSchema(BaseModel):
    name: str
    original_balance: float
    months_to_payoff: int
    total_interest: float


class SimulationResponse(BaseModel):
    """Payoff simulation outcome"""

    strategy: Strategy
    total_months: int
    total_interest: float
    total_paid: float
    payoff_plan: List[DebtPayoffSchema]
    monthly_savings: float
    remaining_balance: float
    capped: bool = Field(description="True when the month cap stopped the simulation with balance left")

    @classmethod
    def from_result(cls, result: SimulationResult) -> "SimulationResponse":
        return cls(
            strategy=result.strategy,
            total_months=result.total_months,
            total_interest=result.total_interest,
            total_paid=result.total_paid,
            payoff_plan=[
                DebtPayoffSchema(
                    name=p.name,
                    original_balance=p.original_balance,
                    months_to_payoff=p.months_to_payoff,
                    total_interest=p.total_interest,
                )
                for p in result.payoff_plan
            ],
            monthly_savings=result.monthly_savings,
            remaining_balance=result.remaining_balance,
            capped=result.total_months >= MAX_MONTHS and result.remaining_balance > 0,
        )


class ComparisonResponse(BaseModel):
    """Response for POST /v1/payoff/compare"""

    avalanche: SimulationResponse
    snowball: SimulationResponse
    interest_difference: float
    recommended: Strategy
    recommended_extra_payment: Optional[float] = None

    @classmethod
    def from_comparison(
        cls,
        comparison: StrategyComparison,
        recommended_extra_payment: Optional[float] = None,
    ) -> "ComparisonResponse":
        return cls(
            avalanche=SimulationResponse.from_result(comparison.avalanche),
            snowball=SimulationResponse.from_result(comparison.snowball),
            interest_difference=comparison.interest_difference,
            recommended=comparison.recommended,
            recommended_extra_payment=recommended_extra_payment,
        )


class CategoryScoreSchema(BaseModel):
    score: int
    max: int
    status: str


class HealthScoreResponse(BaseModel):
    """Financial health score with breakdown"""

    score: int
    max_score: int
    level: str
    breakdown: Dict[str, CategoryScoreSchema]

    @classmethod
    def from_score(cls, health: HealthScore) -> "HealthScoreResponse":
        return cls(
            score=health.score,
            max_score=health.max_score,
            level=health.level,
            breakdown={
                name: CategoryScoreSchema(score=c.score, max=c.max, status=c.status)
                for name, c in health.breakdown.items()
            },
        )


class SnapshotPayload(BaseModel):
    """Request body for PUT /v1/snapshots/{key}; goal and settings entries are stored as-is"""

    debts: List[DebtSchema] = Field(default_factory=list)
    goals: List[Dict[str, Any]] = Field(default_factory=list)
    income: float = Field(0.0, ge=0, description="Annual income")
    settings: Dict[str, Any] = Field(default_factory=dict)


class SnapshotResponse(BaseModel):
    """Stored snapshot, or defaults when nothing is stored under the key"""

    key: str
    data: Dict[str, Any]
    stored: bool
    revision: Optional[int] = None
    updated_at: Optional[str] = None


class BackupDocument(BaseModel):
    """Response for GET /v1/snapshots/{key}/export"""

    version: str
    export_date: str
    data: Dict[str, Any]
