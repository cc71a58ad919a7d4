"""POST /loan and GET /loan/{loan_id} - loan application endpoints"""

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, Request

from loan_gateway.api.routes.schemas import LoanApplicationResponse
from loan_gateway.api.dependencies import get_loan_processor, get_request_id, verify_api_key
from loan_gateway.domain.exceptions import InvalidArgumentError, ValidationError
from loan_gateway.services.processor import LoanApplicationProcessor

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("/loan", response_model=LoanApplicationResponse, status_code=201)
async def submit_loan_application(
    request: Request,
    payload: Any = Body(None),
    processor: LoanApplicationProcessor = Depends(get_loan_processor),
):
    """
    Submit a loan application for eligibility evaluation.

    The body is checked field by field by the domain validator rather than
    by a Pydantic model, so every violated rule is reported in one 400.
    """
    request_id = get_request_id(request)

    try:
        record = await processor.process_application(payload)
    except ValidationError as e:
        logging.warning(f"Rejected loan application: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error(f"Error processing loan application: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return LoanApplicationResponse.from_record(record)


@router.get("/loan/")
def get_loan_application_without_id():
    """GET /loan/ - an ID is mandatory"""
    raise HTTPException(status_code=400, detail="Loan ID is required")


@router.get("/loan/{loan_id}", response_model=LoanApplicationResponse)
def get_loan_application(
    request: Request,
    loan_id: str,
    processor: LoanApplicationProcessor = Depends(get_loan_processor),
):
    """
    Retrieve a loan application with its decision.

    Returns:
        Stored application, 404 if unknown, 400 if the ID is empty
    """
    request_id = get_request_id(request)

    try:
        record = processor.get_application(loan_id)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error(f"Error retrieving loan application: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if record is None:
        raise HTTPException(status_code=404, detail="Loan application not found")

    return LoanApplicationResponse.from_record(record)
