"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from credit_simulator.domain.exceptions import ValidationError

LOW_RISK = "Low risk"
MEDIUM_RISK = "Medium risk"
HIGH_RISK = "High risk"

CREDIT_HISTORY_VALUES = ("good", "bad")
RISK_CATEGORIES = (LOW_RISK, MEDIUM_RISK, HIGH_RISK)


@dataclass(frozen=True)
class ApplicantInput:
    """Validated applicant attributes fed to the scoring engine"""

    name: str
    age: int
    annual_income: float
    debt_to_income_ratio: float
    loan_amount: float
    credit_history: str  # "good" or "bad"


@dataclass(frozen=True)
class ScoringResult:
    """Output of the scoring engine"""

    score: int
    risk_category: str


@dataclass(frozen=True)
class CriteriaInfo:
    """Display copy of the scoring rule magnitudes"""

    base_score: int
    age_under_25: int
    age_over_60: int
    income_over_200k: int
    income_over_100k: int
    income_over_50k: int
    debt_ratio_over_40pct: int
    bad_credit_history: int
    loan_ratio_over_50pct: int
    loan_ratio_under_10pct: int
    loan_ratio_under_25pct: int
    risk_boundaries: Dict[str, str]


@dataclass
class ValidationResult:
    """
    Outcome of validating raw applicant data.

    Exactly one side is populated: a normalized applicant on success,
    or the ordered list of violation messages on failure.
    """

    applicant: Optional[ApplicantInput] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.applicant is not None and not self.errors

    def unwrap(self) -> ApplicantInput:
        """Return the applicant or raise ValidationError with every message"""
        if not self.is_valid:
            raise ValidationError(self.errors)
        return self.applicant
