"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RiskGrade(str, Enum):
    """Coarse crime grade for a property location"""

    A = "A"
    B = "B"
    C = "C"
    F = "F"


DEFAULT_RISK_GRADE = RiskGrade.C


@dataclass(frozen=True)
class LoanApplicationInput:
    """Fully validated loan application fields"""

    applicant_name: str
    property_address: str
    credit_score: float
    monthly_income: float
    requested_amount: float
    loan_term_months: float


@dataclass(frozen=True)
class EligibilityDecision:
    """Output of eligibility evaluation"""

    eligible: bool
    reason: str  # "Passed all checks" or comma-joined failure reasons


@dataclass(frozen=True)
class LoanApplicationRecord:
    """Persisted loan application with its decision"""

    id: str
    applicant_name: str
    property_address: str
    credit_score: float
    monthly_income: float
    requested_amount: float
    loan_term_months: float
    eligible: bool
    reason: str
    crime_grade: RiskGrade
    created_at: datetime
