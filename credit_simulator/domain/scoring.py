"""Credit scoring engine - rule cascade and risk classification"""

from dataclasses import asdict

from credit_simulator.domain.exceptions import ValidationError
from credit_simulator.domain.models import (
    ApplicantInput,
    CriteriaInfo,
    ScoringResult,
    LOW_RISK,
    MEDIUM_RISK,
    HIGH_RISK,
)
from credit_simulator.domain.validation import find_violations

BASE_SCORE = 600
MIN_SCORE = 300
MAX_SCORE = 850

# Age
AGE_UNDER_25_ADJUSTMENT = -50
AGE_OVER_60_ADJUSTMENT = -30

# Income bands (highest matching band wins)
INCOME_OVER_200K_ADJUSTMENT = 120
INCOME_OVER_100K_ADJUSTMENT = 80
INCOME_OVER_50K_ADJUSTMENT = 40

DEBT_RATIO_THRESHOLD = 0.4
DEBT_RATIO_OVER_40PCT_ADJUSTMENT = -80

BAD_CREDIT_HISTORY_ADJUSTMENT = -150

# Loan-to-income
LOAN_RATIO_OVER_50PCT_ADJUSTMENT = -50
LOAN_RATIO_UNDER_10PCT_ADJUSTMENT = 30
LOAN_RATIO_UNDER_25PCT_ADJUSTMENT = 15

LOW_RISK_MIN_SCORE = 750
MEDIUM_RISK_MIN_SCORE = 650


def age_adjustment(age: int) -> int:
    """Under 25 and over 60 are penalized; 25-60 inclusive is neutral"""
    if age < 25:
        return AGE_UNDER_25_ADJUSTMENT
    elif age > 60:
        return AGE_OVER_60_ADJUSTMENT
    return 0


def income_adjustment(annual_income: float) -> int:
    if annual_income > 200_000:
        return INCOME_OVER_200K_ADJUSTMENT
    elif annual_income > 100_000:
        return INCOME_OVER_100K_ADJUSTMENT
    elif annual_income > 50_000:
        return INCOME_OVER_50K_ADJUSTMENT
    return 0


def loan_to_income_ratio(loan_amount: float, annual_income: float) -> float:
    """
    Loan amount as a fraction of annual income.

    Zero income makes the ratio unbounded, so any positive loan lands in
    the highest-penalty band instead of dividing by zero.
    """
    if annual_income == 0:
        return float("inf")
    return loan_amount / annual_income


def loan_ratio_adjustment(ratio: float) -> int:
    """
    Bands:
    - > 0.5:        penalty
    - < 0.1:        large bonus
    - 0.1 - 0.25:   small bonus
    - 0.25 - 0.5:   neutral (both edges inclusive)
    """
    if ratio > 0.5:
        return LOAN_RATIO_OVER_50PCT_ADJUSTMENT
    elif ratio < 0.1:
        return LOAN_RATIO_UNDER_10PCT_ADJUSTMENT
    elif ratio < 0.25:
        return LOAN_RATIO_UNDER_25PCT_ADJUSTMENT
    return 0


def clamp_score(score: float) -> float:
    """Keep score inside the FICO-style 300-850 range"""
    return max(MIN_SCORE, min(MAX_SCORE, score))


def determine_risk_category(score: float) -> str:
    """
    Map final score to a risk category.

    Bands (lower edge inclusive):
    - 750+:     Low risk
    - 650-749:  Medium risk
    - <650:     High risk
    """
    if score >= LOW_RISK_MIN_SCORE:
        return LOW_RISK
    elif score >= MEDIUM_RISK_MIN_SCORE:
        return MEDIUM_RISK
    else:
        return HIGH_RISK


def compute_score(applicant: ApplicantInput) -> ScoringResult:
    """
    Main entry point: score an applicant and classify the risk.

    Adjustments are additive and applied in a fixed order on top of the
    base score of 600. The sum is clamped to 300-850 before rounding.

    Raises:
        ValidationError: If the applicant does not satisfy the input
            constraints (every violation is reported).
    """
    violations = find_violations(**asdict(applicant))
    if violations:
        raise ValidationError(violations)

    score = BASE_SCORE
    score += age_adjustment(applicant.age)
    score += income_adjustment(applicant.annual_income)

    if applicant.debt_to_income_ratio > DEBT_RATIO_THRESHOLD:
        score += DEBT_RATIO_OVER_40PCT_ADJUSTMENT

    if applicant.credit_history == "bad":
        score += BAD_CREDIT_HISTORY_ADJUSTMENT

    ratio = loan_to_income_ratio(applicant.loan_amount, applicant.annual_income)
    score += loan_ratio_adjustment(ratio)

    final_score = int(round(clamp_score(score)))

    return ScoringResult(score=final_score, risk_category=determine_risk_category(final_score))


def describe_criteria() -> CriteriaInfo:
    """Scoring rules for display, built from the constants compute_score uses"""
    return CriteriaInfo(
        base_score=BASE_SCORE,
        age_under_25=AGE_UNDER_25_ADJUSTMENT,
        age_over_60=AGE_OVER_60_ADJUSTMENT,
        income_over_200k=INCOME_OVER_200K_ADJUSTMENT,
        income_over_100k=INCOME_OVER_100K_ADJUSTMENT,
        income_over_50k=INCOME_OVER_50K_ADJUSTMENT,
        debt_ratio_over_40pct=DEBT_RATIO_OVER_40PCT_ADJUSTMENT,
        bad_credit_history=BAD_CREDIT_HISTORY_ADJUSTMENT,
        loan_ratio_over_50pct=LOAN_RATIO_OVER_50PCT_ADJUSTMENT,
        loan_ratio_under_10pct=LOAN_RATIO_UNDER_10PCT_ADJUSTMENT,
        loan_ratio_under_25pct=LOAN_RATIO_UNDER_25PCT_ADJUSTMENT,
        risk_boundaries={
            "low": f">={LOW_RISK_MIN_SCORE}",
            "medium": f"{MEDIUM_RISK_MIN_SCORE}-{LOW_RISK_MIN_SCORE - 1}",
            "high": f"<{MEDIUM_RISK_MIN_SCORE}",
        },
    )
