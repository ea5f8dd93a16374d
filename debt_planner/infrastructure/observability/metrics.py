"""Prometheus metrics for monitoring simulations, health scores, and snapshot traffic"""

from prometheus_client import Counter, Histogram
from debt_planner.domain.payoff import MAX_MONTHS

# Simulation metrics
simulation_counter = Counter(
    "debt_planner_simulation_total",
    "Total payoff simulations run",
    ["strategy"],  # avalanche | snowball
)

capped_simulation_counter = Counter(
    "debt_planner_simulation_capped_total",
    "Simulations that stopped at the month cap with balance remaining",
)

payoff_months_histogram = Histogram(
    "debt_planner_payoff_months",
    "Months until debt free per simulation",
    buckets=[6, 12, 24, 36, 60, 120, 240, 600],
)

# Health score metrics
health_level_counter = Counter(
    "debt_planner_health_score_total",
    "Health scores computed by level",
    ["level"],  # Poor | Fair | Good | Excellent
)

# Snapshot metrics
snapshot_operation_counter = Counter(
    "debt_planner_snapshot_operations_total",
    "Snapshot store operations",
    ["action"],  # save | load | delete | import | export
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(strategy: str, total_months: int, remaining_balance: float) -> None:
    """Record simulation metrics; a run at the cap with balance left counts as capped"""
    simulation_counter.labels(strategy=strategy).inc()
    payoff_months_histogram.observe(total_months)

    if total_months >= MAX_MONTHS and remaining_balance > 0:
        capped_simulation_counter.inc()


def record_health_score(level: str) -> None:
    health_level_counter.labels(level=level).inc()


def record_snapshot_operation(action: str) -> None:
    snapshot_operation_counter.labels(action=action).inc()
