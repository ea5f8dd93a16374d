"""Data access layer for planner snapshots"""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from debt_planner.infrastructure.database.models import PlannerSnapshot


class SnapshotRepository:
    """Repository for keyed snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[PlannerSnapshot]:
        """Fetch snapshot by key"""
        return self.db.get(PlannerSnapshot, key)

    def save(self, key: str, payload: Dict[str, Any]) -> PlannerSnapshot:
        """Insert or replace the snapshot stored under key"""
        snapshot = self.get(key)
        if snapshot is None:
            snapshot = PlannerSnapshot(key=key, payload=payload, revision=1)
            self.db.add(snapshot)
        else:
            snapshot.payload = payload
            snapshot.revision += 1

        self.db.flush()  # Surface constraint errors before commit
        return snapshot

    def delete(self, key: str) -> bool:
        """Remove snapshot; returns False when nothing was stored"""
        snapshot = self.get(key)
        if snapshot is None:
            return False

        self.db.delete(snapshot)
        self.db.flush()
        return True
