"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_crime_grade_client, get_loan_repository
from loan_gateway.config import settings
from loan_gateway.infrastructure.clients.crime import CrimeGradeClient
from loan_gateway.infrastructure.database.models import Base
from loan_gateway.infrastructure.database.repositories import InMemoryLoanRepository


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
def repository() -> Generator[InMemoryLoanRepository, None, None]:
    """Fresh in-memory loan repository"""
    repo = InMemoryLoanRepository()
    yield repo
    repo.clear()


@pytest.fixture
def crime_grade_client() -> CrimeGradeClient:
    """Crime grade client using the built-in address matcher"""
    return CrimeGradeClient(base_url="")


@pytest.fixture
def client(repository: InMemoryLoanRepository, crime_grade_client: CrimeGradeClient) -> TestClient:
    """Create FastAPI test client with an isolated repository"""
    app = create_app()

    def override_get_loan_repository():
        yield repository

    app.dependency_overrides[get_loan_repository] = override_get_loan_repository
    app.dependency_overrides[get_crime_grade_client] = lambda: crime_grade_client
    return TestClient(app)


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """Headers carrying the configured API key"""
    return {"X-API-Key": settings.api_key}


@pytest.fixture
def sample_application() -> Dict[str, Any]:
    """Application that passes every eligibility rule"""
    return {
        "applicant_name": "John Doe",
        "property_address": "558 Carlisle Way Sunnyvale CA 94087",
        "credit_score": 750,
        "monthly_income": 8000,
        "requested_amount": 120000,
        "loan_term_months": 24,
    }
