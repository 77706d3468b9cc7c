"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from credit_simulator.api.main import create_app
from credit_simulator.infrastructure.database.models import Base
from credit_simulator.infrastructure.database.session import get_db
from credit_simulator.domain.models import ApplicantInput


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
def applicant() -> ApplicantInput:
    """Typical applicant: neutral age, moderate income, mid-band loan"""
    return ApplicantInput(
        name="John Doe",
        age=35,
        annual_income=60000,
        debt_to_income_ratio=0.3,
        loan_amount=25000,
        credit_history="good",
    )


@pytest.fixture
def applicant_payload() -> Dict[str, Any]:
    """Same applicant as sent over the wire"""
    return {
        "name": "John Doe",
        "age": 35,
        "annualIncome": 60000,
        "debtToIncomeRatio": 0.3,
        "loanAmount": 25000,
        "creditHistory": "good",
    }
