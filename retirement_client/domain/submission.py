"""Submission state machine: idle -> validating -> in flight -> succeeded | failed.

One machine backs one form. It owns the only mutable state (the current
``SubmissionState``); the UI reads it through :attr:`SubmissionStateMachine.state`
or a subscription and never mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import structlog

from retirement_client.core.client import CalculationClient
from retirement_client.core.errors import CalculationError, FailureKind, normalize_error
from retirement_client.core.request_builder import build_request
from retirement_client.core.response import validate_response
from retirement_client.core.validation import validate_form
from retirement_client.schemas.calculation import CalculationRequest, CalculationResponse
from retirement_client.schemas.validation import ValidationIssue

logger = structlog.get_logger(__name__)


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    status = SubmissionStatus.IDLE

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value}


@dataclass(frozen=True)
class Validating:
    status = SubmissionStatus.VALIDATING

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value}


@dataclass(frozen=True)
class InFlight:
    request: CalculationRequest
    status = SubmissionStatus.IN_FLIGHT

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "request": self.request.to_payload()}


@dataclass(frozen=True)
class Succeeded:
    response: CalculationResponse
    status = SubmissionStatus.SUCCEEDED

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "response": self.response.model_dump(mode="json")}


@dataclass(frozen=True)
class Failed:
    message: str
    cause: FailureKind
    status = SubmissionStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "message": self.message, "cause": self.cause.value}


SubmissionState = Union[Idle, Validating, InFlight, Succeeded, Failed]
StateListener = Callable[[SubmissionState], None]
Notifier = Callable[[str], None]


class SubmissionStateMachine:
    """Sequences validation, request building, the remote call and error mapping.

    At most one call is in flight per machine: :meth:`submit` while a call is
    pending is ignored. Callers should still disable their submit control
    while :attr:`is_loading` is true.
    Any exception other than a calculation failure propagates to the caller
    after the machine has dropped back to Idle.
    """

    def __init__(self, client: CalculationClient, notifier: Optional[Notifier] = None) -> None:
        self._client = client
        self._notifier = notifier
        self._state: SubmissionState = Idle()
        self._issues: Tuple[ValidationIssue, ...] = ()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def issues(self) -> Tuple[ValidationIssue, ...]:
        """Issues from the latest validation pass."""
        return self._issues

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, InFlight)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` on every state change; returns an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: SubmissionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def submit(self, form: Mapping[str, Any]) -> SubmissionState:
        """Run one submission attempt for the raw form values."""
        if self.is_loading:
            logger.warning("submission_ignored", reason="calculation already in flight")
            return self._state

        self._transition(Validating())
        self._issues = validate_form(form)
        if self._issues:
            logger.info(
                "submission_blocked",
                issues=[f"{issue.field}:{issue.kind.value}" for issue in self._issues],
            )
            self._transition(Idle())
            return self._state

        request = build_request(form)
        self._transition(InFlight(request=request))
        try:
            body = await self._client.calculate(request)
            response = validate_response(body)
        except CalculationError as exc:
            message = normalize_error(exc)
            logger.warning("submission_failed", cause=exc.kind.value, error=str(exc))
            self._transition(Failed(message=message, cause=exc.kind))
            if self._notifier is not None:
                self._notifier(message)
            return self._state
        else:
            logger.info(
                "submission_succeeded",
                total_retirement_savings=response.totalRetirementSavings,
                monthly_deposit=response.monthlyDeposit,
            )
            self._transition(Succeeded(response=response))
            return self._state
        finally:
            # Unexpected exceptions still propagate, but never from an InFlight state.
            if isinstance(self._state, InFlight):
                logger.error("submission_aborted", reason="unexpected exception while in flight")
                self._transition(Idle())
