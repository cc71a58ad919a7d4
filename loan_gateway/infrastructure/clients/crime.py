"""Crime grade client with default-grade fallback"""

import logging

import httpx

from loan_gateway.config import settings
from loan_gateway.domain.crime_grade import grade_address
from loan_gateway.domain.exceptions import CrimeGradeAPIError
from loan_gateway.domain.models import RiskGrade, DEFAULT_RISK_GRADE
from loan_gateway.infrastructure.observability.metrics import crime_grade_failures_counter

logger = logging.getLogger(__name__)


class CrimeGradeClient:
    """Client for property-location crime grades"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.base_url = settings.crime_api_base if base_url is None else base_url
        self.api_key = settings.crime_api_key if api_key is None else api_key
        self.timeout = timeout or settings.http_timeout_seconds

    async def get_crime_grade(self, address: str) -> RiskGrade:
        """
        Look up the crime grade for a property address.

        Never raises: any lookup failure is logged and degrades to the
        default grade C.
        """
        try:
            if not self.base_url:
                return grade_address(address)
            return await self._fetch_crime_grade(address)
        except Exception as e:
            crime_grade_failures_counter.inc()
            logger.warning(f"Crime grade lookup failed, using default grade: {e}")
            return DEFAULT_RISK_GRADE

    async def _fetch_crime_grade(self, address: str) -> RiskGrade:
        """
        Fetch the grade from the external crime data API.

        Raises:
            CrimeGradeAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/crime-data",
                    params={"address": address, "api_key": self.api_key},
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise CrimeGradeAPIError(f"Crime API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise CrimeGradeAPIError(f"Crime API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise CrimeGradeAPIError(f"Crime API unreachable: {e}") from e
            except ValueError as e:
                raise CrimeGradeAPIError(f"Invalid crime data response: {e}") from e

        grade = data.get("crimeGrade") if isinstance(data, dict) else None
        try:
            return RiskGrade(grade)
        except ValueError:
            return DEFAULT_RISK_GRADE
