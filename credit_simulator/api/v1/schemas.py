"""Pydantic schemas for API responses (camelCase on the wire)"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CustomerSchema(CamelModel):
    """Normalized applicant data echoed back after scoring"""

    name: str
    age: int
    annual_income: float
    debt_to_income_ratio: float
    loan_amount: float
    credit_history: str


class SimulateResponse(CamelModel):
    """Response for POST /api/simulate"""

    id: int
    score: int
    risk_category: str
    message: str = "Credit score calculated successfully"
    customer: CustomerSchema


class SimulationSummary(CamelModel):
    """Single simulation in the history list"""

    id: int
    name: str
    score: int
    risk_category: str
    loan_amount: float
    created_at: datetime


class SimulationListResponse(BaseModel):
    """Response for GET /api/simulations"""

    count: int
    simulations: List[SimulationSummary]


class SimulationDetail(CustomerSchema):
    """Full stored simulation"""

    id: int
    score: int
    risk_category: str
    created_at: datetime


class SimulationDetailResponse(BaseModel):
    """Response for GET /api/simulation/{id}"""

    simulation: SimulationDetail


class CriteriaSchema(BaseModel):
    """Scoring rule magnitudes for display"""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    base_score: int = Field(..., alias="baseScore")
    age_under_25: int = Field(..., alias="ageUnder25")
    age_over_60: int = Field(..., alias="ageOver60")
    income_over_200k: int = Field(..., alias="incomeOver200k")
    income_over_100k: int = Field(..., alias="incomeOver100k")
    income_over_50k: int = Field(..., alias="incomeOver50k")
    debt_ratio_over_40pct: int = Field(..., alias="debtRatioOver40pct")
    bad_credit_history: int = Field(..., alias="badCreditHistory")
    loan_ratio_over_50pct: int = Field(..., alias="loanRatioOver50pct")
    loan_ratio_under_10pct: int = Field(..., alias="loanRatioUnder10pct")
    loan_ratio_under_25pct: int = Field(..., alias="loanRatioUnder25pct")
    risk_boundaries: Dict[str, str] = Field(..., alias="riskBoundaries")


class CriteriaResponse(BaseModel):
    """Response for GET /api/scoring-criteria"""

    criteria: CriteriaSchema
    disclaimer: str


class HealthResponse(BaseModel):
    """Response for GET /api/health"""

    status: str
    service: str
    timestamp: str
    uptime: float


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints"""

    error: str
    message: str | None = None
    details: List[str] | None = None
