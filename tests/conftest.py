"""Pytest fixtures for testing"""

import pytest
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from balance_gateway.api.main import create_app
from balance_gateway.infrastructure.database.models import Base, SessionRecord, TransactionRecord, SavingsGoalRecord
from balance_gateway.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SESSION_ID = "3b1f8c2e-5d7a-4e09-9a61-2c4f0d8e7b15"


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
def session_id(db: Session) -> str:
    """An issued session with no data yet"""
    db.add(SessionRecord(session_id=SESSION_ID))
    db.commit()
    return SESSION_ID


@pytest.fixture
def add_transaction(db: Session, session_id: str) -> Callable[..., TransactionRecord]:
    """Insert a stored transaction for the test session"""

    def _add(date: str, amount: int, type: str = "deposit") -> TransactionRecord:
        record = TransactionRecord(session_id=session_id, date=date, amount=amount, type=type)
        db.add(record)
        db.commit()
        return record

    return _add


@pytest.fixture
def add_goal(db: Session, session_id: str) -> Callable[..., SavingsGoalRecord]:
    """Insert a stored savings goal for the test session"""

    def _add(
        name: str,
        goal: int,
        save_per_month: int,
        date: str,
        min_balance_required: int = 0,
    ) -> SavingsGoalRecord:
        record = SavingsGoalRecord(
            session_id=session_id,
            name=name,
            goal=goal,
            save_per_month=save_per_month,
            min_balance_required=min_balance_required,
            date=date,
        )
        db.add(record)
        db.commit()
        return record

    return _add
