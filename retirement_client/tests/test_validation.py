from __future__ import annotations

import pytest

from retirement_client.core.validation import (
    AGE_BOUNDS,
    INTEREST_RATE_BOUNDS,
    parse_number,
    validate_age_order,
    validate_field,
    validate_form,
)
from retirement_client.schemas.validation import IssueKind

from retirement_client.tests.fakes import valid_form


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_age_is_required(value):
    issue = validate_field("currentAge", value, AGE_BOUNDS)

    assert issue.kind is IssueKind.REQUIRED
    assert issue.bound is None
    assert issue.message == "This field is required"


def test_age_below_minimum_echoes_bound():
    issue = validate_field("currentAge", "17", AGE_BOUNDS)

    assert issue.kind is IssueKind.BELOW_MIN
    assert issue.bound == 18
    assert issue.message == "Minimum value is 18"


def test_age_above_maximum_echoes_bound():
    issue = validate_field("currentAge", 101, AGE_BOUNDS)

    assert issue.kind is IssueKind.ABOVE_MAX
    assert issue.bound == 100
    assert issue.message == "Maximum value is 100"


@pytest.mark.parametrize("value", ["18", "100", 42, "65.0"])
def test_ages_within_bounds_pass(value):
    assert validate_field("retirementAge", value, AGE_BOUNDS) is None


@pytest.mark.parametrize("value", ["abc", "30.5", "nan", True])
def test_unusable_age_is_invalid(value):
    assert validate_field("currentAge", value, AGE_BOUNDS).kind is IssueKind.INVALID


def test_interest_rate_is_optional_but_bounded():
    assert validate_field("customInterestRate", "", INTEREST_RATE_BOUNDS) is None
    assert validate_field("customInterestRate", "5.5", INTEREST_RATE_BOUNDS) is None
    assert validate_field("customInterestRate", "-1", INTEREST_RATE_BOUNDS).bound == 0
    assert validate_field("customInterestRate", "150", INTEREST_RATE_BOUNDS).bound == 100


@pytest.mark.parametrize("current, retirement", [(65, 65), ("70", "40")])
def test_age_order_requires_retirement_after_current(current, retirement):
    issue = validate_age_order(current, retirement)

    assert issue.field == "form"
    assert issue.kind is IssueKind.CROSS_FIELD


def test_valid_form_has_no_issues():
    assert validate_form(valid_form()) == ()


def test_cross_field_issue_blocks_otherwise_valid_form():
    form = {**valid_form(), "currentAge": "65", "retirementAge": "60"}

    issues = validate_form(form)

    assert [issue.kind for issue in issues] == [IssueKind.CROSS_FIELD]


def test_field_failure_short_circuits_cross_field_check():
    form = {**valid_form(), "retirementAge": ""}

    issues = validate_form(form)

    assert [(issue.field, issue.kind) for issue in issues] == [
        ("retirementAge", IssueKind.REQUIRED)
    ]


def test_unknown_lifestyle_is_invalid():
    form = {**valid_form(), "lifestyleType": "luxury"}

    issues = validate_form(form)

    assert [(issue.field, issue.kind) for issue in issues] == [
        ("lifestyleType", IssueKind.INVALID)
    ]


def test_validation_is_repeatable():
    form = {"currentAge": "17", "retirementAge": "101"}

    assert validate_form(form) == validate_form(form)


def test_huge_integer_is_above_maximum():
    issue = validate_field("currentAge", 10**400, AGE_BOUNDS)

    assert issue.kind is IssueKind.ABOVE_MAX
    assert issue.bound == 100


@pytest.mark.parametrize(
    "value, kind",
    [("1" + "0" * 400, IssueKind.ABOVE_MAX), ("1e400", IssueKind.ABOVE_MAX), ("-1e400", IssueKind.BELOW_MIN)],
)
def test_out_of_float_range_text_is_out_of_bounds(value, kind):
    assert validate_field("retirementAge", value, AGE_BOUNDS).kind is kind


@pytest.mark.parametrize("value", ["3_0", "٣٠", "0x1F", "Infinity", "1e", "."])
def test_only_ascii_decimal_text_is_numeric(value):
    assert validate_field("currentAge", value, AGE_BOUNDS).kind is IssueKind.INVALID


@pytest.mark.parametrize("value, expected", [(" 30 ", 30), ("3e1", 30), ("+45", 45), (".5", 0.5)])
def test_decimal_and_exponent_forms_parse(value, expected):
    assert parse_number(value) == expected
