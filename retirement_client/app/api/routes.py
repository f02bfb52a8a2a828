"""HTTP routes relaying form submissions to the calculator."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from typing import Any, Callable, Dict

from flask import Blueprint, current_app, jsonify, request

from retirement_client.core.client import CalculationClient
from retirement_client.core.errors import CalculationError
from retirement_client.domain.submission import (
    SubmissionState,
    SubmissionStateMachine,
    SubmissionStatus,
)
from retirement_client.schemas.health import HealthResponse

ClientFactory = Callable[[], CalculationClient]

api_bp = Blueprint("api", __name__)

_STATUS_CODES = {
    SubmissionStatus.SUCCEEDED: HTTPStatus.OK,
    SubmissionStatus.FAILED: HTTPStatus.BAD_GATEWAY,
    SubmissionStatus.IDLE: HTTPStatus.UNPROCESSABLE_ENTITY,
}


async def _submit(factory: ClientFactory, form: Dict[str, Any]) -> SubmissionStateMachine:
    async with factory() as client:
        machine = SubmissionStateMachine(client)
        await machine.submit(form)
    return machine


async def _health(factory: ClientFactory) -> str:
    async with factory() as client:
        return await client.health()


@api_bp.get("/health")
def health() -> Any:
    """Report whether the calculator service answers its health probe."""
    try:
        detail = asyncio.run(_health(current_app.config["CALCULATION_CLIENT_FACTORY"]))
    except CalculationError as exc:
        response = HealthResponse(status="down", detail=str(exc))
        return jsonify(response.model_dump()), HTTPStatus.SERVICE_UNAVAILABLE
    return jsonify(HealthResponse(status="up", detail=detail).model_dump())


@api_bp.post("/calculator/submit")
def submit() -> Any:
    """Validate and forward one form submission; reply with the final state."""
    raw_payload = request.get_json(force=True, silent=True)
    form: Dict[str, Any] = raw_payload if isinstance(raw_payload, dict) else {}

    machine = asyncio.run(_submit(current_app.config["CALCULATION_CLIENT_FACTORY"], form))
    state: SubmissionState = machine.state
    body = state.to_dict()
    body["issues"] = [issue.as_dict() for issue in machine.issues]
    return jsonify(body), _STATUS_CODES[state.status]
