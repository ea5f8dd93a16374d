"""Snapshot payload handling - defaults, backup documents, and conversion to engine inputs"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Tuple
from debt_planner.domain.exceptions import InvalidBackupError
from debt_planner.domain.models import Debt, FinancialSnapshot, Strategy
from debt_planner.utils.money import coerce_amount

BACKUP_VERSION = "1.0"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "currency": "USD",
    "date_format": "MM/DD/YYYY",
    "theme": "light",
    "notifications": True,
    "auto_save": True,
    "default_strategy": Strategy.AVALANCHE.value,
}


# Settings keys as written by the browser app
CAMEL_SETTINGS = {
    "dateFormat": "date_format",
    "autoSave": "auto_save",
    "defaultStrategy": "default_strategy",
}


def default_snapshot() -> Dict[str, Any]:
    """Fresh payload returned for keys that were never saved"""
    return {"debts": [], "goals": [], "income": 0.0, "settings": dict(DEFAULT_SETTINGS)}


def normalize_snapshot(payload: Any) -> Dict[str, Any]:
    """
    Fill in defaults for missing or corrupt snapshot sections.

    - debts / goals must be lists, otherwise []
    - income must be numeric, otherwise 0
    - stored settings are merged over DEFAULT_SETTINGS, browser camelCase keys renamed
    """
    snapshot = default_snapshot()
    if not isinstance(payload, Mapping):
        return snapshot

    if isinstance(payload.get("debts"), list):
        snapshot["debts"] = [d for d in payload["debts"] if isinstance(d, Mapping)]
    if isinstance(payload.get("goals"), list):
        snapshot["goals"] = [g for g in payload["goals"] if isinstance(g, Mapping)]

    snapshot["income"] = coerce_amount(payload.get("income"))

    if isinstance(payload.get("settings"), Mapping):
        stored = payload["settings"]
        # camelCase keys first so an explicit snake_case key wins
        for name in sorted(stored, key=lambda n: n not in CAMEL_SETTINGS):
            snapshot["settings"][CAMEL_SETTINGS.get(name, name)] = stored[name]

    return snapshot


def _field(record: Mapping[str, Any], snake: str, camel: str) -> Any:
    # Backups written by the browser app use camelCase keys
    return record[snake] if snake in record else record.get(camel)


def debt_from_record(record: Mapping[str, Any]) -> Debt:
    """Build a Debt from a stored record; unparseable numbers become 0 (inert)"""
    return Debt(
        name=str(record.get("name") or ""),
        balance=coerce_amount(record.get("balance")),
        rate=coerce_amount(record.get("rate")),
        minimum_payment=coerce_amount(_field(record, "minimum_payment", "minimumPayment")),
        type=str(record.get("type") or "other"),
    )


def debts_from_records(records: List[Mapping[str, Any]]) -> Tuple[Debt, ...]:
    return tuple(debt_from_record(record) for record in records)


def emergency_savings(goals: List[Mapping[str, Any]]) -> float:
    """Current amount of the first Emergency goal, 0 if there is none"""
    for goal in goals:
        if goal.get("category") == "Emergency":
            return coerce_amount(_field(goal, "current_amount", "currentAmount"))
    return 0.0


def snapshot_to_financials(payload: Any) -> FinancialSnapshot:
    """
    Derive engine inputs from a stored snapshot, the way the dashboard does:
    savings come from the Emergency goal and monthly expenses are the
    total of minimum payments.
    """
    snapshot = normalize_snapshot(payload)
    debts = debts_from_records(snapshot["debts"])
    return FinancialSnapshot(
        debts=debts,
        income=snapshot["income"],
        savings=emergency_savings(snapshot["goals"]),
        monthly_expenses=sum(debt.minimum_payment for debt in debts),
    )


def preferred_strategy(payload: Any) -> Strategy:
    """Strategy from snapshot settings, avalanche when unset or unknown"""
    value = normalize_snapshot(payload)["settings"].get("default_strategy")
    try:
        return Strategy(value)
    except ValueError:
        return Strategy.AVALANCHE


def build_backup(payload: Any, exported_at: datetime | None = None) -> Dict[str, Any]:
    """Wrap a snapshot in a versioned backup document"""
    exported_at = exported_at or datetime.now(timezone.utc)
    return {
        "version": BACKUP_VERSION,
        "export_date": exported_at.isoformat(),
        "data": normalize_snapshot(payload),
    }


def parse_backup(document: Any) -> Dict[str, Any]:
    """
    Extract the snapshot from a backup document.

    Raises:
        InvalidBackupError: document is not an object or lacks version/data
    """
    if not isinstance(document, Mapping):
        raise InvalidBackupError("Backup must be a JSON object")
    if not document.get("version") or not isinstance(document.get("data"), Mapping):
        raise InvalidBackupError("Invalid backup file format: 'version' and 'data' are required")
    return normalize_snapshot(document["data"])
