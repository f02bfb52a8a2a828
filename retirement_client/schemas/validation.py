"""Structured validation issues produced by the form validators."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

FORM_FIELD = "form"


class IssueKind(str, Enum):
    REQUIRED = "required"
    BELOW_MIN = "belowMin"
    ABOVE_MAX = "aboveMax"
    CROSS_FIELD = "crossField"
    INVALID = "invalid"


class ValidationIssue(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    kind: IssueKind
    bound: Optional[Union[int, float]] = None

    @property
    def message(self) -> str:
        if self.kind is IssueKind.REQUIRED:
            return "This field is required"
        if self.kind is IssueKind.BELOW_MIN:
            return f"Minimum value is {self.bound}"
        if self.kind is IssueKind.ABOVE_MAX:
            return f"Maximum value is {self.bound}"
        if self.kind is IssueKind.CROSS_FIELD:
            return "Retirement age must be greater than current age"
        return "Please enter a valid value"

    def as_dict(self) -> dict:
        data = self.model_dump(mode="json", exclude_none=True)
        data["message"] = self.message
        return data
