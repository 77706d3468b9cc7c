"""Unit tests for applicant input validation"""

import pytest
from typing import Any, Dict
from credit_simulator.domain.exceptions import ValidationError
from credit_simulator.domain.models import ApplicantInput
from credit_simulator.domain.validation import (
    AGE_MESSAGE,
    CREDIT_HISTORY_MESSAGE,
    DEBT_RATIO_MESSAGE,
    INCOME_MESSAGE,
    LOAN_MESSAGE,
    NAME_MESSAGE,
    validate_applicant,
)


def test_valid_payload_is_normalized(applicant_payload: Dict[str, Any]):
    result = validate_applicant({**applicant_payload, "name": "  John Doe  "})

    assert result.is_valid
    assert result.errors == []
    assert result.applicant == ApplicantInput(
        name="John Doe",
        age=35,
        annual_income=60000.0,
        debt_to_income_ratio=0.3,
        loan_amount=25000.0,
        credit_history="good",
    )


def test_all_violations_reported_together(applicant_payload: Dict[str, Any]):
    """Every bad field produces its own message, in field order"""
    result = validate_applicant(
        {
            **applicant_payload,
            "age": 15,
            "annualIncome": -1000,
            "debtToIncomeRatio": 2.0,
            "loanAmount": -5000,
            "creditHistory": "invalid",
        }
    )

    assert not result.is_valid
    assert result.applicant is None
    assert result.errors == [
        AGE_MESSAGE,
        INCOME_MESSAGE,
        DEBT_RATIO_MESSAGE,
        LOAN_MESSAGE,
        CREDIT_HISTORY_MESSAGE,
    ]


def test_unwrap_raises_with_every_message(applicant_payload: Dict[str, Any]):
    result = validate_applicant({**applicant_payload, "age": 121, "creditHistory": "excellent"})

    with pytest.raises(ValidationError) as exc_info:
        result.unwrap()

    assert exc_info.value.messages == [AGE_MESSAGE, CREDIT_HISTORY_MESSAGE]
    assert str(exc_info.value).startswith("Validation failed: ")


def test_unwrap_returns_applicant(applicant_payload: Dict[str, Any]):
    assert validate_applicant(applicant_payload).unwrap().name == "John Doe"


@pytest.mark.parametrize("name", [None, "", "   ", "x" * 101, 42])
def test_invalid_name(applicant_payload: Dict[str, Any], name: Any):
    assert validate_applicant({**applicant_payload, "name": name}).errors == [NAME_MESSAGE]


def test_name_length_measured_after_trimming(applicant_payload: Dict[str, Any]):
    result = validate_applicant({**applicant_payload, "name": "  " + "x" * 100 + "  "})

    assert result.is_valid
    assert len(result.applicant.name) == 100


@pytest.mark.parametrize("age", [17, 121, 35.5, True, "abc", None])
def test_invalid_age(applicant_payload: Dict[str, Any], age: Any):
    assert validate_applicant({**applicant_payload, "age": age}).errors == [AGE_MESSAGE]


@pytest.mark.parametrize("age, expected", [(18, 18), (120, 120), (35.0, 35), ("42", 42)])
def test_age_coercion(applicant_payload: Dict[str, Any], age: Any, expected: int):
    result = validate_applicant({**applicant_payload, "age": age})

    assert result.is_valid
    assert result.applicant.age == expected


@pytest.mark.parametrize("income", [-1, float("nan"), float("inf"), "lots", False])
def test_invalid_income(applicant_payload: Dict[str, Any], income: Any):
    assert validate_applicant({**applicant_payload, "annualIncome": income}).errors == [INCOME_MESSAGE]


def test_zero_income_is_accepted(applicant_payload: Dict[str, Any]):
    """Zero income passes validation; the engine treats its loan ratio as unbounded"""
    result = validate_applicant({**applicant_payload, "annualIncome": 0})

    assert result.is_valid
    assert result.applicant.annual_income == 0


def test_numeric_strings_are_accepted(applicant_payload: Dict[str, Any]):
    result = validate_applicant({**applicant_payload, "annualIncome": "60000", "loanAmount": " 25000.5 "})

    assert result.is_valid
    assert result.applicant.annual_income == 60000.0
    assert result.applicant.loan_amount == 25000.5


@pytest.mark.parametrize("ratio", [-0.01, 1.01, float("inf")])
def test_invalid_debt_ratio(applicant_payload: Dict[str, Any], ratio: Any):
    assert validate_applicant({**applicant_payload, "debtToIncomeRatio": ratio}).errors == [DEBT_RATIO_MESSAGE]


@pytest.mark.parametrize("ratio", [0, 1])
def test_debt_ratio_bounds_inclusive(applicant_payload: Dict[str, Any], ratio: float):
    assert validate_applicant({**applicant_payload, "debtToIncomeRatio": ratio}).is_valid


@pytest.mark.parametrize("loan", [0, -5000, None])
def test_invalid_loan_amount(applicant_payload: Dict[str, Any], loan: Any):
    assert validate_applicant({**applicant_payload, "loanAmount": loan}).errors == [LOAN_MESSAGE]


@pytest.mark.parametrize("history", ["Good", "excellent", "", None])
def test_invalid_credit_history(applicant_payload: Dict[str, Any], history: Any):
    assert validate_applicant({**applicant_payload, "creditHistory": history}).errors == [CREDIT_HISTORY_MESSAGE]


def test_non_mapping_reports_every_field():
    result = validate_applicant(["not", "an", "object"])

    assert result.errors == [
        NAME_MESSAGE,
        AGE_MESSAGE,
        INCOME_MESSAGE,
        DEBT_RATIO_MESSAGE,
        LOAN_MESSAGE,
        CREDIT_HISTORY_MESSAGE,
    ]


@pytest.mark.parametrize("field", ["annualIncome", "loanAmount", "age"])
def test_underscored_numeric_strings_rejected(applicant_payload: Dict[str, Any], field: str):
    result = validate_applicant({**applicant_payload, field: "6_0000"})

    assert not result.is_valid
    assert len(result.errors) == 1


def test_integer_beyond_float_range_rejected(applicant_payload: Dict[str, Any]):
    assert validate_applicant({**applicant_payload, "annualIncome": 10**400}).errors == [INCOME_MESSAGE]
