"""/v1/snapshots/{key} - keyed snapshot storage, backup/restore, and plans over stored data"""

import json
import logging
import time
from typing import Annotated, Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from debt_planner.api.dependencies import get_request_id
from debt_planner.api.v1.payoff import observe_simulation
from debt_planner.api.v1.schemas import (
    BackupDocument,
    HealthScoreResponse,
    SimulationResponse,
    SnapshotPayload,
    SnapshotResponse,
)
from debt_planner.config import settings
from debt_planner.domain.exceptions import InvalidBackupError, SnapshotNotFoundError
from debt_planner.domain.health import score_snapshot
from debt_planner.domain.models import Strategy
from debt_planner.domain.payoff import simulate
from debt_planner.domain.snapshots import (
    build_backup,
    default_snapshot,
    normalize_snapshot,
    parse_backup,
    preferred_strategy,
    snapshot_to_financials,
)
from debt_planner.infrastructure.database.models import PlannerSnapshot
from debt_planner.infrastructure.database.repositories import SnapshotRepository
from debt_planner.infrastructure.database.session import get_db
from debt_planner.infrastructure.observability.logging import log_health_score
from debt_planner.infrastructure.observability.metrics import record_health_score, record_snapshot_operation

router = APIRouter()

SnapshotKey = Annotated[str, Path(min_length=1, max_length=128, pattern=r"^[A-Za-z0-9_.:-]+$")]


def _check_size(payload: Dict[str, Any]) -> None:
    if len(json.dumps(payload)) > settings.max_snapshot_bytes:
        raise HTTPException(status_code=413, detail="Snapshot too large")


def _stored_payload(db: Session, key: str) -> Dict[str, Any]:
    """Stored snapshot with defaults filled in; defaults alone when the key is unknown"""
    snapshot = SnapshotRepository(db).get(key)
    return normalize_snapshot(snapshot.payload) if snapshot else default_snapshot()


def _to_response(key: str, snapshot: Optional[PlannerSnapshot]) -> SnapshotResponse:
    if snapshot is None:
        return SnapshotResponse(key=key, data=default_snapshot(), stored=False)
    return SnapshotResponse(
        key=key,
        data=normalize_snapshot(snapshot.payload),
        stored=True,
        revision=snapshot.revision,
        updated_at=snapshot.updated_at.isoformat() if snapshot.updated_at else None,
    )


def _save(db: Session, key: str, payload: Dict[str, Any], request_id: str) -> PlannerSnapshot:
    try:
        snapshot = SnapshotRepository(db).save(key, payload)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Snapshot save failed: {e}", extra={"request_id": request_id, "snapshot_key": key})
        raise HTTPException(status_code=500, detail="Internal server error")

    db.refresh(snapshot)
    return snapshot


@router.put("/snapshots/{key}", response_model=SnapshotResponse)
def save_snapshot(
    key: SnapshotKey,
    request_body: SnapshotPayload,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Store debts, goals, income and settings under key, replacing any previous snapshot"""
    payload = normalize_snapshot(request_body.model_dump())
    _check_size(payload)

    snapshot = _save(db, key, payload, request_id)

    record_snapshot_operation("save")
    return _to_response(key, snapshot)


@router.get("/snapshots/{key}", response_model=SnapshotResponse)
def load_snapshot(key: SnapshotKey, db: Session = Depends(get_db)):
    """Load snapshot; unknown keys return defaults with stored=false"""
    record_snapshot_operation("load")
    return _to_response(key, SnapshotRepository(db).get(key))


@router.delete("/snapshots/{key}", status_code=204)
def delete_snapshot(
    key: SnapshotKey,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    try:
        if not SnapshotRepository(db).delete(key):
            raise SnapshotNotFoundError(f"No snapshot stored under '{key}'")
        db.commit()

    except SnapshotNotFoundError as e:
        db.rollback()
        logging.warning(f"Snapshot not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    record_snapshot_operation("delete")


@router.get("/snapshots/{key}/export", response_model=BackupDocument)
def export_snapshot(
    key: SnapshotKey,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Export stored snapshot as a versioned backup document"""
    try:
        snapshot = SnapshotRepository(db).get(key)
        if snapshot is None:
            raise SnapshotNotFoundError(f"No snapshot stored under '{key}'")

    except SnapshotNotFoundError as e:
        logging.warning(f"Snapshot not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    record_snapshot_operation("export")
    return build_backup(snapshot.payload)


@router.post("/snapshots/{key}/import", response_model=SnapshotResponse)
def import_snapshot(
    key: SnapshotKey,
    document: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Restore snapshot from a backup document, replacing current data"""
    try:
        payload = parse_backup(document)

    except InvalidBackupError as e:
        logging.warning(f"Invalid backup: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    _check_size(payload)
    snapshot = _save(db, key, payload, request_id)

    record_snapshot_operation("import")
    return _to_response(key, snapshot)


@router.get("/snapshots/{key}/plan", response_model=SimulationResponse)
def plan_for_snapshot(
    key: SnapshotKey,
    strategy: Optional[Strategy] = Query(None, description="Defaults to the snapshot's default_strategy setting"),
    extra_payment: float = Query(0.0, ge=0),
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Simulate payoff of the stored debts"""
    start_time = time.perf_counter()
    payload = _stored_payload(db, key)
    financials = snapshot_to_financials(payload)

    result = simulate(financials.debts, extra_payment, strategy or preferred_strategy(payload))

    observe_simulation(result, request_id, len(financials.debts), start_time)
    return SimulationResponse.from_result(result)


@router.get("/snapshots/{key}/health-score", response_model=HealthScoreResponse)
def health_for_snapshot(
    key: SnapshotKey,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """
    Score the stored snapshot.

    Savings come from the Emergency goal's current amount; monthly
    expenses are the total of minimum payments.
    """
    health = score_snapshot(snapshot_to_financials(_stored_payload(db, key)))

    record_health_score(health.level)
    log_health_score(request_id, health.score, health.level)
    return HealthScoreResponse.from_score(health)
