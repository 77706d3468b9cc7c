"""Simulation endpoints - score, persist, and list credit simulations"""

import re
import time
import logging
from dataclasses import asdict
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from credit_simulator.api.v1.schemas import (
    CustomerSchema,
    ErrorResponse,
    SimulateResponse,
    SimulationDetail,
    SimulationDetailResponse,
    SimulationListResponse,
    SimulationSummary,
)
from credit_simulator.api.dependencies import get_request_id
from credit_simulator.config import settings
from credit_simulator.domain.scoring import compute_score
from credit_simulator.domain.validation import validate_applicant
from credit_simulator.infrastructure.database.models import Simulation
from credit_simulator.infrastructure.database.repositories import SimulationRepository
from credit_simulator.infrastructure.database.session import get_db
from credit_simulator.infrastructure.observability.logging import log_simulation
from credit_simulator.infrastructure.observability.metrics import record_simulation, validation_failure_counter

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_ID_MESSAGE = "ID must be a positive integer"
ID_PATTERN = re.compile(r"\+?[0-9]+")

# Largest id a 64-bit INTEGER column can hold
MAX_SIMULATION_ID = 2**63 - 1


def error_response(status_code: int, error: str, message: str | None = None, details: List[str] | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def validation_error_response(messages: List[str]) -> JSONResponse:
    return error_response(400, "Validation failed", details=messages)


def to_summary(simulation: Simulation) -> SimulationSummary:
    return SimulationSummary(
        id=simulation.id,
        name=simulation.name,
        score=simulation.score,
        risk_category=simulation.risk_category,
        loan_amount=simulation.loan_amount,
        created_at=simulation.created_at,
    )


def to_detail(simulation: Simulation) -> SimulationDetail:
    return SimulationDetail(
        id=simulation.id,
        name=simulation.name,
        age=simulation.age,
        annual_income=simulation.annual_income,
        debt_to_income_ratio=simulation.debt_to_income_ratio,
        loan_amount=simulation.loan_amount,
        credit_history=simulation.credit_history,
        score=simulation.score,
        risk_category=simulation.risk_category,
        created_at=simulation.created_at,
    )


@router.post(
    "/simulate",
    response_model=SimulateResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def simulate(
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """
    Score an applicant and store the result.

    Flow:
    1. Validate the raw body (all field violations reported together)
    2. Compute score and risk category
    3. Persist the simulation
    4. Return score with the normalized applicant data
    """
    start_time = time.time()
    request_id = get_request_id(request)

    # 1. Validate
    validation = validate_applicant(payload)
    if not validation.is_valid:
        validation_failure_counter.inc()
        logger.warning(
            "Validation failed",
            extra={"request_id": request_id, "errors": validation.errors},
        )
        return validation_error_response(validation.errors)

    applicant = validation.applicant

    # 2. Score
    result = compute_score(applicant)

    # 3. Persist
    try:
        simulation_repo = SimulationRepository(db)
        db_simulation = simulation_repo.create_simulation(applicant, result)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {e}", extra={"request_id": request_id})
        return error_response(500, "Failed to calculate credit score", message="Could not store simulation")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_simulation(result.score, result.risk_category)
    log_simulation(request_id, db_simulation.id, result.score, result.risk_category, duration_ms)

    return SimulateResponse(
        id=db_simulation.id,
        score=result.score,
        risk_category=result.risk_category,
        customer=CustomerSchema(**asdict(applicant)),
    )


@router.get(
    "/simulations",
    response_model=SimulationListResponse,
    responses={500: {"model": ErrorResponse}},
)
def list_simulations(request: Request, db: Session = Depends(get_db)):
    """
    Retrieve previous simulations, newest first.

    Returns:
        Count plus a summary (name, score, risk, loan amount) per simulation
    """
    try:
        simulation_repo = SimulationRepository(db)
        simulations = simulation_repo.list_simulations(limit=settings.simulations_list_limit)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {e}", extra={"request_id": get_request_id(request)})
        return error_response(500, "Failed to fetch simulations", message="Could not read simulations")

    return SimulationListResponse(
        count=len(simulations),
        simulations=[to_summary(s) for s in simulations],
    )


@router.get(
    "/simulation/{simulation_id}",
    response_model=SimulationDetailResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_simulation(simulation_id: str, request: Request, db: Session = Depends(get_db)):
    """Retrieve one stored simulation with all applicant fields"""
    # Plain ASCII digits only; int() alone would take "1_0" or " 7"
    if not ID_PATTERN.fullmatch(simulation_id):
        return validation_error_response([INVALID_ID_MESSAGE])

    digits = simulation_id.lstrip("+").lstrip("0")
    if not digits:
        return validation_error_response([INVALID_ID_MESSAGE])

    def not_found() -> JSONResponse:
        return error_response(404, "Simulation not found", message=f"No simulation found with ID {digits}")

    # Ids past the column range can never have been assigned
    if len(digits) > len(str(MAX_SIMULATION_ID)) or int(digits) > MAX_SIMULATION_ID:
        return not_found()

    parsed_id = int(digits)

    try:
        simulation_repo = SimulationRepository(db)
        simulation = simulation_repo.get_simulation_by_id(parsed_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {e}", extra={"request_id": get_request_id(request)})
        return error_response(500, "Failed to fetch simulation", message="Could not read simulation")

    if not simulation:
        return not_found()

    return SimulationDetailResponse(simulation=to_detail(simulation))
