"""Failure taxonomy for a submission attempt and the user-facing messages.

``normalize_error`` is the only place that decides what text the user sees
when a calculation fails.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

DEFAULT_ERROR_MESSAGE = "An error occurred while calculating retirement savings."
RETRY_ERROR_MESSAGE = "Error calculating retirement savings. Please try again."
CLIENT_ERROR_PREFIX = "Client error: "


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    SERVER = "server"
    RESPONSE_SHAPE = "response_shape"


class CalculationError(Exception):
    """Base class for failures of a single calculation call."""

    kind: FailureKind


class TransportError(CalculationError):
    """The request never produced a response (connection, DNS, timeout)."""

    kind = FailureKind.TRANSPORT

    def __init__(self, detail: str = ""):
        super().__init__(detail or "transport failure")
        self.detail = detail


class ServerError(CalculationError):
    """The calculator answered with an error status."""

    kind = FailureKind.SERVER

    def __init__(self, status_code: int, body: Optional[Dict[str, Any]] = None):
        super().__init__(f"calculator returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def field_errors(self) -> List[Dict[str, Any]]:
        if not self.body:
            return []
        errors = self.body.get("fieldErrors")
        return errors if isinstance(errors, list) else []


class ResponseShapeError(CalculationError):
    """A successful reply broke the response contract."""

    kind = FailureKind.RESPONSE_SHAPE

    def __init__(self, reason: str, fields: Sequence[str] = ()):
        super().__init__(f"invalid response format: {reason}")
        self.reason = reason
        self.fields = tuple(fields)


def _text_field(body: Optional[Dict[str, Any]], name: str) -> Optional[str]:
    if not body:
        return None
    value = body.get(name)
    if isinstance(value, str) and value.strip():
        return value
    return None


def normalize_error(exc: CalculationError) -> str:
    """Map any calculation failure onto one user-facing message."""
    if isinstance(exc, TransportError):
        if exc.detail:
            return f"{CLIENT_ERROR_PREFIX}{exc.detail}"
        return RETRY_ERROR_MESSAGE

    if isinstance(exc, ServerError):
        return (
            _text_field(exc.body, "message")
            or _text_field(exc.body, "error")
            or DEFAULT_ERROR_MESSAGE
        )

    return DEFAULT_ERROR_MESSAGE
