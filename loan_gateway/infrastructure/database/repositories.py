"""Data access layer for loan applications"""

import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union
from sqlalchemy.orm import Session
from loan_gateway.infrastructure.database.models import LoanApplicationRow
from loan_gateway.domain.models import LoanApplicationRecord, RiskGrade


class LoanApplicationRepository(ABC):
    """Storage capability the application processor depends on"""

    @abstractmethod
    def save(self, record: LoanApplicationRecord) -> LoanApplicationRecord:
        """Persist a record and return the stored view of it"""

    @abstractmethod
    def find_by_id(self, loan_id: str) -> Optional[LoanApplicationRecord]:
        """Return the record with this ID, or None"""

    @abstractmethod
    def find_all(self) -> List[LoanApplicationRecord]:
        """Return every stored record"""

    @abstractmethod
    def delete(self, loan_id: str) -> bool:
        """Remove a record; True if one existed"""

    @abstractmethod
    def clear(self) -> None:
        """Remove all records"""


def _require_id(record: LoanApplicationRecord) -> None:
    if not record.id:
        raise ValueError("Loan ID is required")


class InMemoryLoanRepository(LoanApplicationRepository):
    """Process-local repository keyed by loan ID"""

    def __init__(self):
        self._loans: Dict[str, LoanApplicationRecord] = {}
        self._lock = threading.Lock()

    def save(self, record: LoanApplicationRecord) -> LoanApplicationRecord:
        _require_id(record)
        stored = replace(record, created_at=datetime.now(timezone.utc))
        with self._lock:
            self._loans[stored.id] = stored
        return stored

    def find_by_id(self, loan_id: str) -> Optional[LoanApplicationRecord]:
        with self._lock:
            return self._loans.get(loan_id)

    def find_all(self) -> List[LoanApplicationRecord]:
        with self._lock:
            return list(self._loans.values())

    def delete(self, loan_id: str) -> bool:
        with self._lock:
            return self._loans.pop(loan_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._loans.clear()


class SqlLoanRepository(LoanApplicationRepository):
    """Repository backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, record: LoanApplicationRecord) -> LoanApplicationRecord:
        """Insert the record and commit"""
        _require_id(record)
        row = LoanApplicationRow(
            id=record.id,
            applicant_name=record.applicant_name,
            property_address=record.property_address,
            credit_score=record.credit_score,
            monthly_income=record.monthly_income,
            requested_amount=record.requested_amount,
            loan_term_months=record.loan_term_months,
            eligible=record.eligible,
            reason=record.reason,
            crime_grade=RiskGrade(record.crime_grade).value,
            created_at=record.created_at,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return _to_record(row)

    def find_by_id(self, loan_id: str) -> Optional[LoanApplicationRecord]:
        row = self.db.get(LoanApplicationRow, loan_id)
        return _to_record(row) if row else None

    def find_all(self) -> List[LoanApplicationRecord]:
        rows = self.db.query(LoanApplicationRow).order_by(LoanApplicationRow.created_at).all()
        return [_to_record(row) for row in rows]

    def delete(self, loan_id: str) -> bool:
        row = self.db.get(LoanApplicationRow, loan_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True

    def clear(self) -> None:
        self.db.query(LoanApplicationRow).delete()
        self.db.commit()


def _restore_number(value: float) -> Union[int, float]:
    # Float columns turn an int input like 750 into 750.0
    return int(value) if value.is_integer() else value


def _to_record(row: LoanApplicationRow) -> LoanApplicationRecord:
    created_at = row.created_at
    # SQLite drops tzinfo; stored values are always UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return LoanApplicationRecord(
        id=row.id,
        applicant_name=row.applicant_name,
        property_address=row.property_address,
        credit_score=_restore_number(row.credit_score),
        monthly_income=_restore_number(row.monthly_income),
        requested_amount=_restore_number(row.requested_amount),
        loan_term_months=_restore_number(row.loan_term_months),
        eligible=row.eligible,
        reason=row.reason,
        crime_grade=RiskGrade(row.crime_grade),
        created_at=created_at,
    )
