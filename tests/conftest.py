"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from debt_planner.api.main import create_app
from debt_planner.infrastructure.database.models import Base
from debt_planner.infrastructure.database.session import get_db
from debt_planner.domain.models import Debt


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_debts() -> list[Debt]:
    """Typical household debt mix"""
    return [
        Debt(name="Car Loan", balance=8000.0, rate=6.5, minimum_payment=250.0, type="auto_loan"),
        Debt(name="Visa", balance=3000.0, rate=22.9, minimum_payment=90.0, type="credit_card"),
        Debt(name="Store Card", balance=600.0, rate=18.0, minimum_payment=35.0, type="credit_card"),
    ]
