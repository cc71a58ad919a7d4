"""Eligibility rules engine - core business logic for loan decisions"""

from typing import Union

from loan_gateway.domain.models import EligibilityDecision, RiskGrade

MIN_CREDIT_SCORE = 700
INCOME_MULTIPLIER = 1.5
DISQUALIFYING_GRADE = RiskGrade.F

PASSED_REASON = "Passed all checks"
CREDIT_SCORE_REASON = "Credit score too low"
INCOME_REASON = "Monthly income too low"
CRIME_GRADE_REASON = "Property location has unacceptable crime grade"


def required_monthly_income(requested_amount: float, loan_term_months: float) -> float:
    """Income needed to cover the flat monthly payment with a 1.5x margin"""
    monthly_payment = requested_amount / loan_term_months
    return monthly_payment * INCOME_MULTIPLIER


def evaluate_eligibility(
    credit_score: float,
    monthly_income: float,
    requested_amount: float,
    loan_term_months: float,
    crime_grade: Union[RiskGrade, str],
) -> EligibilityDecision:
    """
    Apply all eligibility rules and collect every failure.

    Rules (evaluated in this order, no short-circuit):
    - Credit score must be at least 700
    - Monthly income must be strictly greater than
      (requested_amount / loan_term_months) * 1.5
    - Crime grade must not be F

    Returns:
        EligibilityDecision whose reason lists failures in rule order
    """
    reasons = []

    if credit_score < MIN_CREDIT_SCORE:
        reasons.append(CREDIT_SCORE_REASON)

    # Equality fails: income has to exceed the requirement
    if monthly_income <= required_monthly_income(requested_amount, loan_term_months):
        reasons.append(INCOME_REASON)

    if RiskGrade(crime_grade) == DISQUALIFYING_GRADE:
        reasons.append(CRIME_GRADE_REASON)

    eligible = not reasons
    return EligibilityDecision(
        eligible=eligible,
        reason=PASSED_REASON if eligible else ", ".join(reasons),
    )
