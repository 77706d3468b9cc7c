"""GET /api/scoring-criteria - Explain the scoring rules"""

from dataclasses import asdict

from fastapi import APIRouter

from credit_simulator.api.v1.schemas import CriteriaResponse, CriteriaSchema
from credit_simulator.domain.scoring import describe_criteria

router = APIRouter()

DISCLAIMER = "This is a demonstration scoring model and should not be used for actual credit decisions."


@router.get("/scoring-criteria", response_model=CriteriaResponse)
def get_scoring_criteria():
    return CriteriaResponse(
        criteria=CriteriaSchema(**asdict(describe_criteria())),
        disclaimer=DISCLAIMER,
    )
