"""Pydantic schemas for API responses"""

from typing import Union

from pydantic import BaseModel

from loan_gateway.domain.models import LoanApplicationRecord


class LoanApplicationResponse(BaseModel):
    """Response for POST /loan and GET /loan/{loan_id}"""

    id: str
    applicant_name: str
    property_address: str
    credit_score: Union[int, float]
    monthly_income: Union[int, float]
    requested_amount: Union[int, float]
    loan_term_months: Union[int, float]
    eligible: bool
    reason: str
    crime_grade: str
    created_at: str

    @classmethod
    def from_record(cls, record: LoanApplicationRecord) -> "LoanApplicationResponse":
        return cls(
            id=record.id,
            applicant_name=record.applicant_name,
            property_address=record.property_address,
            credit_score=record.credit_score,
            monthly_income=record.monthly_income,
            requested_amount=record.requested_amount,
            loan_term_months=record.loan_term_months,
            eligible=record.eligible,
            reason=record.reason,
            crime_grade=record.crime_grade.value,
            created_at=record.created_at.isoformat(),
        )


class HealthResponse(BaseModel):
    """Response for GET /health"""

    status: str
    service: str
    timestamp: str
