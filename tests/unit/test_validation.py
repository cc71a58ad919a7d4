"""Unit tests for loan application payload validation"""

import pytest
from loan_gateway.domain.exceptions import ValidationError
from loan_gateway.domain.models import LoanApplicationInput
from loan_gateway.domain.validation import parse_loan_application, validate_loan_application


def test_valid_payload_has_no_errors(sample_application):
    """Test a complete payload passes every check"""
    assert validate_loan_application(sample_application) == []


def test_empty_payload_reports_every_field():
    """Test one error per required field"""
    errors = validate_loan_application({})

    assert errors == [
        "Applicant name is required and must be a string",
        "Property address is required and must be a string",
        "Credit score is required and must be a number between 300 and 850",
        "Monthly income is required and must be a positive number",
        "Requested amount is required and must be a positive number",
        "Loan term months is required and must be a positive number",
    ]


@pytest.mark.parametrize("payload", [None, [], "application", 42])
def test_non_mapping_payload_treated_as_empty(payload):
    """Test payloads that are not JSON objects report all six errors"""
    assert len(validate_loan_application(payload)) == 6


def test_wrong_types_are_rejected(sample_application):
    """Test text fields must be strings and numeric fields numbers"""
    payload = {
        **sample_application,
        "applicant_name": 123,
        "property_address": ["Sunnyvale"],
        "credit_score": "750",
        "monthly_income": "8000",
    }

    errors = validate_loan_application(payload)

    assert errors == [
        "Applicant name is required and must be a string",
        "Property address is required and must be a string",
        "Credit score is required and must be a number between 300 and 850",
        "Monthly income is required and must be a positive number",
    ]


@pytest.mark.parametrize("credit_score", [299, 851, 0, -700, True])
def test_credit_score_out_of_range(sample_application, credit_score):
    """Test credit score must be a number within 300-850"""
    errors = validate_loan_application({**sample_application, "credit_score": credit_score})

    assert errors == ["Credit score is required and must be a number between 300 and 850"]


@pytest.mark.parametrize("credit_score", [300, 850, 712.5])
def test_credit_score_bounds_inclusive(sample_application, credit_score):
    """Test both ends of the credit score range are accepted"""
    assert validate_loan_application({**sample_application, "credit_score": credit_score}) == []


def test_zero_amount_reported_as_missing(sample_application):
    """Test a zero requested amount gives the same error as an absent one"""
    zero = validate_loan_application({**sample_application, "requested_amount": 0})
    absent = validate_loan_application({k: v for k, v in sample_application.items() if k != "requested_amount"})

    assert zero == absent == ["Requested amount is required and must be a positive number"]


@pytest.mark.parametrize("field", ["monthly_income", "requested_amount", "loan_term_months"])
@pytest.mark.parametrize("value", [-1, -0.5, float("nan"), float("inf"), False, None])
def test_numeric_fields_must_be_positive_numbers(sample_application, field, value):
    """Test negative, non-finite and non-numeric values are rejected"""
    errors = validate_loan_application({**sample_application, field: value})

    assert len(errors) == 1
    assert "must be a positive number" in errors[0]


def test_empty_strings_reported_as_missing(sample_application):
    """Test empty names and addresses fail the presence check"""
    errors = validate_loan_application({**sample_application, "applicant_name": "", "property_address": ""})

    assert len(errors) == 2


def test_parse_returns_typed_input(sample_application):
    """Test parsing a valid payload builds the input dataclass"""
    application = parse_loan_application(sample_application)

    assert application == LoanApplicationInput(
        applicant_name="John Doe",
        property_address="558 Carlisle Way Sunnyvale CA 94087",
        credit_score=750,
        monthly_income=8000,
        requested_amount=120000,
        loan_term_months=24,
    )


def test_parse_raises_with_all_errors():
    """Test parsing an invalid payload raises ValidationError carrying every error"""
    with pytest.raises(ValidationError) as exc_info:
        parse_loan_application({"applicant_name": "Jane Doe"})

    assert len(exc_info.value.errors) == 5
    assert str(exc_info.value).startswith("Validation failed: Property address is required")


@pytest.mark.parametrize("field", ["credit_score", "monthly_income", "requested_amount", "loan_term_months"])
def test_integer_beyond_float_range_rejected(sample_application, field):
    """Test an integer too large for a float is reported, not raised"""
    errors = validate_loan_application({**sample_application, field: 10**400})

    assert len(errors) == 1
    assert "is required and must be a" in errors[0]
