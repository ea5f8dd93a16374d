"""Domain models - pure Python dataclasses representing planning inputs and results"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Strategy(str, Enum):
    """Greedy ordering used to target extra payments"""

    AVALANCHE = "avalanche"  # highest interest rate first
    SNOWBALL = "snowball"  # smallest balance first


@dataclass(frozen=True)
class Debt:
    """Outstanding debt as supplied by the caller"""

    name: str
    balance: float
    rate: float  # annual percentage rate, e.g. 18.99
    minimum_payment: float
    type: str = "other"


@dataclass(frozen=True)
class DebtPayoff:
    """Per-debt outcome of a payoff simulation"""

    name: str
    original_balance: float
    months_to_payoff: int  # 0 if the balance never reached zero
    total_interest: float


@dataclass(frozen=True)
class SimulationResult:
    """Output of a month-by-month payoff simulation"""

    strategy: Strategy
    total_months: int
    total_interest: float
    total_paid: float
    payoff_plan: Tuple[DebtPayoff, ...]
    monthly_savings: float
    remaining_balance: float = 0.0


@dataclass(frozen=True)
class StrategyComparison:
    """Avalanche and snowball results side by side"""

    avalanche: SimulationResult
    snowball: SimulationResult
    interest_difference: float  # snowball interest minus avalanche interest
    recommended: Strategy


@dataclass(frozen=True)
class CategoryScore:
    """Single category of the financial health breakdown"""

    score: int
    max: int
    status: str


@dataclass(frozen=True)
class HealthScore:
    """Financial health score with per-category breakdown"""

    score: int
    level: str
    breakdown: Dict[str, CategoryScore]
    max_score: int = 100


@dataclass(frozen=True)
class FinancialSnapshot:
    """Immutable bundle of the figures the scorer and simulator work from"""

    debts: Tuple[Debt, ...] = field(default_factory=tuple)
    income: float = 0.0  # annual
    savings: float = 0.0
    monthly_expenses: float = 0.0
