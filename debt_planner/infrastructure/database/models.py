"""SQLAlchemy ORM models for persisted planner snapshots"""

from sqlalchemy import Column, DateTime, Integer, JSON, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class PlannerSnapshot(Base):
    """User snapshot ({debts, goals, income, settings}) stored under a caller-chosen key"""

    __tablename__ = "planner_snapshot"

    key = Column(Text, primary_key=True)
    payload = Column(JSON, nullable=False)
    revision = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
