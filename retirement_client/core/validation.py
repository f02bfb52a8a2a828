"""Field and cross-field checks for the retirement form.

Validators are plain functions returning ``ValidationIssue`` values. The
two phases are composed by :func:`validate_form`: every field is checked on
its own first, and the age comparison only runs once both ages passed.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from retirement_client.schemas.calculation import (
    AGE_MAX,
    AGE_MIN,
    INTEREST_RATE_MAX,
    INTEREST_RATE_MIN,
    LifestyleType,
)
from retirement_client.schemas.validation import FORM_FIELD, IssueKind, ValidationIssue

Number = Union[int, float]

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_DECIMAL_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class FieldBounds:
    minimum: Number
    maximum: Number
    integer: bool = False
    required: bool = True


AGE_BOUNDS = FieldBounds(minimum=AGE_MIN, maximum=AGE_MAX, integer=True)
INTEREST_RATE_BOUNDS = FieldBounds(
    minimum=INTEREST_RATE_MIN, maximum=INTEREST_RATE_MAX, required=False
)

FIELD_BOUNDS = {
    "currentAge": AGE_BOUNDS,
    "retirementAge": AGE_BOUNDS,
    "customInterestRate": INTEREST_RATE_BOUNDS,
}


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any) -> Optional[Number]:
    """Coerce a raw form value to a number, or ``None`` when it is not one.

    Text has to be an ASCII decimal, optionally with an exponent. Integers
    keep full precision; decimals beyond float range become infinities so the
    range checks still report them.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if _INTEGER_TEXT.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # past the interpreter's int digit limit
                number = float(text)
        elif _DECIMAL_TEXT.fullmatch(text):
            number = float(text)
        else:
            return None
    else:
        return None

    if math.isnan(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def validate_field(name: str, value: Any, bounds: FieldBounds) -> Optional[ValidationIssue]:
    """Check one raw value against its declared bounds."""
    if is_blank(value):
        if bounds.required:
            return ValidationIssue(field=name, kind=IssueKind.REQUIRED)
        return None

    number = parse_number(value)
    if number is None or (bounds.integer and not isinstance(number, int)):
        return ValidationIssue(field=name, kind=IssueKind.INVALID)
    if number < bounds.minimum:
        return ValidationIssue(field=name, kind=IssueKind.BELOW_MIN, bound=bounds.minimum)
    if number > bounds.maximum:
        return ValidationIssue(field=name, kind=IssueKind.ABOVE_MAX, bound=bounds.maximum)
    return None


def validate_lifestyle(value: Any) -> Optional[ValidationIssue]:
    # Unset falls back to the default lifestyle when the request is built.
    if is_blank(value):
        return None
    try:
        LifestyleType(value)
    except ValueError:
        return ValidationIssue(field="lifestyleType", kind=IssueKind.INVALID)
    return None


def validate_age_order(current_age: Any, retirement_age: Any) -> Optional[ValidationIssue]:
    """Form-level check: retirement has to come strictly after the current age."""
    if parse_number(current_age) >= parse_number(retirement_age):
        return ValidationIssue(field=FORM_FIELD, kind=IssueKind.CROSS_FIELD)
    return None


def validate_form(form: Mapping[str, Any]) -> Tuple[ValidationIssue, ...]:
    """Run every field check, then the cross-field check when the ages allow it."""
    issues = []
    for name, bounds in FIELD_BOUNDS.items():
        issue = validate_field(name, form.get(name), bounds)
        if issue is not None:
            issues.append(issue)

    lifestyle_issue = validate_lifestyle(form.get("lifestyleType"))
    if lifestyle_issue is not None:
        issues.append(lifestyle_issue)

    failed_fields = {issue.field for issue in issues}
    if not failed_fields & {"currentAge", "retirementAge"}:
        order_issue = validate_age_order(form.get("currentAge"), form.get("retirementAge"))
        if order_issue is not None:
            issues.append(order_issue)

    return tuple(issues)
