"""Domain-specific exceptions"""

from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Loan application payload failed field checks"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Validation failed: {', '.join(self.errors)}")


class InvalidArgumentError(DomainException):
    """Caller passed an unusable argument, e.g. an empty loan ID"""

    pass


class CrimeGradeAPIError(DomainException):
    """Crime grade API returned an error or is unavailable"""

    pass
