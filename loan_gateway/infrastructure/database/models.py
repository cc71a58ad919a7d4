"""SQLAlchemy ORM models for persisted loan applications"""

from sqlalchemy import Column, String, Boolean, Float, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class LoanApplicationRow(Base):
    """Loan application with its eligibility decision"""

    __tablename__ = "loan_application"

    id = Column(String(36), primary_key=True)
    applicant_name = Column(Text, nullable=False)
    property_address = Column(Text, nullable=False)
    credit_score = Column(Float, nullable=False)
    monthly_income = Column(Float, nullable=False)
    requested_amount = Column(Float, nullable=False)
    loan_term_months = Column(Float, nullable=False)
    eligible = Column(Boolean, nullable=False)
    reason = Column(Text, nullable=False)
    crime_grade = Column(String(1), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
