"""Loan application processing - validation, grading, decision, persistence"""

import time
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from loan_gateway.domain.eligibility import evaluate_eligibility
from loan_gateway.domain.exceptions import InvalidArgumentError
from loan_gateway.domain.models import LoanApplicationRecord
from loan_gateway.domain.validation import parse_loan_application
from loan_gateway.infrastructure.clients.crime import CrimeGradeClient
from loan_gateway.infrastructure.database.repositories import LoanApplicationRepository
from loan_gateway.infrastructure.observability.logging import log_decision
from loan_gateway.infrastructure.observability.metrics import record_decision


class LoanApplicationProcessor:
    """Orchestrates validation, crime grading and eligibility for one application"""

    def __init__(self, repository: LoanApplicationRepository, crime_grade_client: CrimeGradeClient):
        self.repository = repository
        self.crime_grade_client = crime_grade_client

    async def process_application(self, payload: Any) -> LoanApplicationRecord:
        """
        Evaluate a raw application payload and persist the decision.

        Flow:
        1. Validate payload (nothing is stored on failure)
        2. Look up crime grade for the property address
        3. Evaluate eligibility rules
        4. Build record with fresh ID and creation time
        5. Save through the repository and return its stored view

        Raises:
            ValidationError: If the payload fails field checks
        """
        start_time = time.time()

        application = parse_loan_application(payload)

        crime_grade = await self.crime_grade_client.get_crime_grade(application.property_address)

        decision = evaluate_eligibility(
            application.credit_score,
            application.monthly_income,
            application.requested_amount,
            application.loan_term_months,
            crime_grade,
        )

        record = LoanApplicationRecord(
            id=str(uuid.uuid4()),
            applicant_name=application.applicant_name,
            property_address=application.property_address,
            credit_score=application.credit_score,
            monthly_income=application.monthly_income,
            requested_amount=application.requested_amount,
            loan_term_months=application.loan_term_months,
            eligible=decision.eligible,
            reason=decision.reason,
            crime_grade=crime_grade,
            created_at=datetime.now(timezone.utc),
        )

        saved = self.repository.save(record)

        duration_ms = (time.time() - start_time) * 1000
        record_decision(saved.eligible, saved.crime_grade.value)
        log_decision(saved.id, saved.eligible, saved.crime_grade.value, saved.reason, duration_ms)

        return saved

    def get_application(self, loan_id: Optional[str]) -> Optional[LoanApplicationRecord]:
        """
        Fetch a stored application.

        Returns:
            The record, or None when no application has this ID

        Raises:
            InvalidArgumentError: If loan_id is empty
        """
        if not loan_id or not loan_id.strip():
            raise InvalidArgumentError("Loan ID is required")

        return self.repository.find_by_id(loan_id)
