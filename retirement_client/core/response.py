"""Gate that a calculator reply must pass before it is trusted."""

from __future__ import annotations

import numbers
from typing import Any

import structlog
from pydantic import ValidationError

from retirement_client.core.errors import ResponseShapeError
from retirement_client.schemas.calculation import (
    REQUIRED_RESPONSE_FIELDS,
    CalculationResponse,
)

logger = structlog.get_logger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_response(body: Any) -> CalculationResponse:
    """Check the numeric result fields and hand the body back untouched.

    Raises:
        ResponseShapeError: the body is not an object, a result field is
            missing or not numeric, or an echoed field has the wrong type.
    """
    if not isinstance(body, dict):
        logger.warning("response_contract_violation", reason="not an object")
        raise ResponseShapeError("body is not a JSON object")

    bad_fields = [name for name in REQUIRED_RESPONSE_FIELDS if not _is_number(body.get(name))]
    if bad_fields:
        logger.warning("response_contract_violation", fields=bad_fields)
        raise ResponseShapeError("missing or non-numeric result fields", bad_fields)

    try:
        return CalculationResponse.model_validate(body)
    except ValidationError as exc:
        # union members report one error each under the same field
        fields = list(dict.fromkeys(str(error["loc"][0]) for error in exc.errors()))
        logger.warning("response_contract_violation", fields=fields)
        raise ResponseShapeError("unexpected field types", fields) from exc
