"""Unit tests for the snapshot repository"""

from sqlalchemy.orm import Session
from debt_planner.infrastructure.database.repositories import SnapshotRepository


def test_save_and_get_snapshot(db: Session):
    repo = SnapshotRepository(db)

    repo.save("household", {"income": 50000, "debts": []})
    db.commit()

    snapshot = repo.get("household")
    assert snapshot is not None
    assert snapshot.payload["income"] == 50000
    assert snapshot.revision == 1


def test_save_existing_key_replaces_payload(db: Session):
    repo = SnapshotRepository(db)
    repo.save("household", {"income": 50000})
    db.commit()

    repo.save("household", {"income": 65000})
    db.commit()

    snapshot = repo.get("household")
    assert snapshot.payload == {"income": 65000}
    assert snapshot.revision == 2


def test_get_missing_snapshot(db: Session):
    assert SnapshotRepository(db).get("nobody") is None


def test_delete_snapshot(db: Session):
    repo = SnapshotRepository(db)
    repo.save("household", {"income": 1})
    db.commit()

    assert repo.delete("household") is True
    db.commit()

    assert repo.get("household") is None
    assert repo.delete("household") is False
