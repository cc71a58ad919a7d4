"""Structural and range checks for raw loan application payloads"""

import math
from typing import Any, List, Mapping

from loan_gateway.domain.exceptions import ValidationError
from loan_gateway.domain.models import LoanApplicationInput

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range, e.g. a 400-digit JSON literal
        return False


def _is_positive_number(value: Any) -> bool:
    return bool(value) and _is_number(value) and value > 0


def validate_loan_application(payload: Any) -> List[str]:
    """
    Check a raw payload and return every violated rule.

    All checks run so the caller sees every problem at once. Presence is a
    truthiness check: a numeric 0 or an empty string reports the same
    "is required" error as an absent field.

    Returns:
        List of human-readable errors, empty when the payload is valid
    """
    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
    errors = []

    applicant_name = data.get("applicant_name")
    if not applicant_name or not isinstance(applicant_name, str):
        errors.append("Applicant name is required and must be a string")

    property_address = data.get("property_address")
    if not property_address or not isinstance(property_address, str):
        errors.append("Property address is required and must be a string")

    credit_score = data.get("credit_score")
    if (
        not credit_score
        or not _is_number(credit_score)
        or credit_score < MIN_CREDIT_SCORE
        or credit_score > MAX_CREDIT_SCORE
    ):
        errors.append(
            f"Credit score is required and must be a number between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}"
        )

    if not _is_positive_number(data.get("monthly_income")):
        errors.append("Monthly income is required and must be a positive number")

    if not _is_positive_number(data.get("requested_amount")):
        errors.append("Requested amount is required and must be a positive number")

    if not _is_positive_number(data.get("loan_term_months")):
        errors.append("Loan term months is required and must be a positive number")

    return errors


def parse_loan_application(payload: Any) -> LoanApplicationInput:
    """
    Validate a raw payload and build the typed input from it.

    Raises:
        ValidationError: If any field check fails
    """
    errors = validate_loan_application(payload)
    if errors:
        raise ValidationError(errors)

    return LoanApplicationInput(
        applicant_name=payload["applicant_name"],
        property_address=payload["property_address"],
        credit_score=payload["credit_score"],
        monthly_income=payload["monthly_income"],
        requested_amount=payload["requested_amount"],
        loan_term_months=payload["loan_term_months"],
    )
