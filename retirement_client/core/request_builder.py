"""Shape validated form input into a typed calculation request."""

from __future__ import annotations

from typing import Any, Mapping

from retirement_client.core.validation import is_blank, parse_number
from retirement_client.schemas.calculation import (
    DEFAULT_LIFESTYLE,
    CalculationRequest,
    LifestyleType,
)


def build_request(form: Mapping[str, Any]) -> CalculationRequest:
    """Build the request from a form that already passed ``validate_form``.

    No validation happens here; string values are coerced to numbers and an
    unset lifestyle falls back to ``simple``.
    """
    lifestyle = form.get("lifestyleType")
    custom_rate = form.get("customInterestRate")

    return CalculationRequest(
        currentAge=parse_number(form["currentAge"]),
        retirementAge=parse_number(form["retirementAge"]),
        lifestyleType=DEFAULT_LIFESTYLE if is_blank(lifestyle) else LifestyleType(lifestyle),
        customInterestRate=None if is_blank(custom_rate) else parse_number(custom_rate),
    )
