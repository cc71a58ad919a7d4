"""Dependency injection for FastAPI endpoints"""

import secrets
from typing import Generator, Optional

from fastapi import Depends, Header, HTTPException, Request
from loan_gateway.config import settings
from loan_gateway.infrastructure.clients.crime import CrimeGradeClient
from loan_gateway.infrastructure.database.repositories import (
    InMemoryLoanRepository,
    LoanApplicationRepository,
    SqlLoanRepository,
)
from loan_gateway.infrastructure.database.session import SessionLocal
from loan_gateway.services.processor import LoanApplicationProcessor

# Shared by every request when storage_backend is "memory"
memory_repository = InMemoryLoanRepository()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def verify_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """Reject requests without the shared secret in X-API-Key"""
    if not x_api_key:
        raise HTTPException(status_code=401, detail="API key is required")

    if not secrets.compare_digest(x_api_key.encode("utf-8"), settings.api_key.encode("utf-8")):
        raise HTTPException(status_code=401, detail="Invalid API key")


def get_loan_repository() -> Generator[LoanApplicationRepository, None, None]:
    """Provide the configured loan repository"""
    if settings.storage_backend == "sql":
        db = SessionLocal()
        try:
            yield SqlLoanRepository(db)
        finally:
            db.close()
    else:
        yield memory_repository


def get_crime_grade_client() -> CrimeGradeClient:
    """Provide crime grade client instance"""
    return CrimeGradeClient()


def get_loan_processor(
    repository: LoanApplicationRepository = Depends(get_loan_repository),
    crime_grade_client: CrimeGradeClient = Depends(get_crime_grade_client),
) -> LoanApplicationProcessor:
    """Provide application processor wired to its collaborators"""
    return LoanApplicationProcessor(repository, crime_grade_client)
