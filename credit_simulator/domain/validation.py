"""Applicant input validation - checks raw request data before scoring"""

import math
from typing import Any, List, Mapping, Optional

from credit_simulator.domain.models import ApplicantInput, ValidationResult, CREDIT_HISTORY_VALUES

NAME_MAX_LENGTH = 100
MIN_AGE = 18
MAX_AGE = 120

NAME_MESSAGE = f"Name must be between 1 and {NAME_MAX_LENGTH} characters"
AGE_MESSAGE = f"Age must be an integer between {MIN_AGE} and {MAX_AGE}"
INCOME_MESSAGE = "Annual income must be a positive number"
DEBT_RATIO_MESSAGE = "Debt-to-income ratio must be between 0 and 1"
LOAN_MESSAGE = "Loan amount must be a positive number"
CREDIT_HISTORY_MESSAGE = 'Credit history must be either "good" or "bad"'


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _to_number(value: Any) -> Optional[float]:
    """Coerce JSON numbers and numeric strings; booleans are not numbers"""
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            # float() also takes digit-group underscores ("6_0000")
            if "_" in value:
                return None
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


def _to_int(value: Any) -> Optional[int]:
    """Coerce to int, accepting floats and strings only when integral (35.0 -> 35)"""
    if _is_integer(value):
        return value

    number = _to_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def find_violations(
    name: Any,
    age: Any,
    annual_income: Any,
    debt_to_income_ratio: Any,
    loan_amount: Any,
    credit_history: Any,
) -> List[str]:
    """
    Check already-typed applicant values against every field constraint.

    Each field is checked independently so the caller sees all problems
    at once. Messages come back in field order.
    """
    errors = []

    if not isinstance(name, str) or not 1 <= len(name.strip()) <= NAME_MAX_LENGTH:
        errors.append(NAME_MESSAGE)

    if not _is_integer(age) or not MIN_AGE <= age <= MAX_AGE:
        errors.append(AGE_MESSAGE)

    if not _is_finite_number(annual_income) or annual_income < 0:
        errors.append(INCOME_MESSAGE)

    if not _is_finite_number(debt_to_income_ratio) or not 0 <= debt_to_income_ratio <= 1:
        errors.append(DEBT_RATIO_MESSAGE)

    if not _is_finite_number(loan_amount) or loan_amount <= 0:
        errors.append(LOAN_MESSAGE)

    if credit_history not in CREDIT_HISTORY_VALUES:
        errors.append(CREDIT_HISTORY_MESSAGE)

    return errors


def validate_applicant(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a raw applicant record (camelCase keys, as sent by clients).

    Returns a ValidationResult holding either the normalized ApplicantInput
    (name trimmed, numbers coerced) or the ordered violation messages.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    name = raw.get("name")
    if isinstance(name, str):
        name = name.strip()

    age = _to_int(raw.get("age"))
    annual_income = _to_number(raw.get("annualIncome"))
    debt_to_income_ratio = _to_number(raw.get("debtToIncomeRatio"))
    loan_amount = _to_number(raw.get("loanAmount"))
    credit_history = raw.get("creditHistory")

    errors = find_violations(name, age, annual_income, debt_to_income_ratio, loan_amount, credit_history)
    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        applicant=ApplicantInput(
            name=name,
            age=age,
            annual_income=annual_income,
            debt_to_income_ratio=debt_to_income_ratio,
            loan_amount=loan_amount,
            credit_history=credit_history,
        )
    )
