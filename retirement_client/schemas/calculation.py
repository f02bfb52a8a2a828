"""Data contracts for the remote retirement calculation endpoint."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class LifestyleType(str, Enum):
    SIMPLE = "simple"
    FANCY = "fancy"


DEFAULT_LIFESTYLE = LifestyleType.SIMPLE

AGE_MIN = 18
AGE_MAX = 100
INTEREST_RATE_MIN = 0
INTEREST_RATE_MAX = 100

# Fields the response gate insists on before a body is trusted.
REQUIRED_RESPONSE_FIELDS = ("totalRetirementSavings", "monthlyDeposit", "yearsToRetirement")

# Breakdown returned by an earlier revision of the calculator service.
LEGACY_RESPONSE_FIELDS = ("futureValue", "totalDeposits", "interestEarned")

# Int or float exactly as received; no coercion between the two.
JsonNumber = Union[StrictInt, StrictFloat]


class CalculationRequest(BaseModel):
    """Typed payload sent to the calculator for one submission attempt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    currentAge: int = Field(..., ge=AGE_MIN, le=AGE_MAX)
    retirementAge: int = Field(..., ge=AGE_MIN, le=AGE_MAX)
    lifestyleType: LifestyleType = DEFAULT_LIFESTYLE
    customInterestRate: Optional[float] = Field(
        default=None,
        ge=INTEREST_RATE_MIN,
        le=INTEREST_RATE_MAX,
        description="Annual rate in percent, only sent when the user typed one.",
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the POST call, without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class CalculationResponse(BaseModel):
    """Successful calculator reply, kept as the server sent it."""

    model_config = ConfigDict(extra="allow", frozen=True)

    currentAge: Optional[JsonNumber] = None
    retirementAge: Optional[JsonNumber] = None
    interestRate: Optional[JsonNumber] = None
    lifestyleType: Optional[str] = None
    totalRetirementSavings: JsonNumber
    monthlyDeposit: JsonNumber
    yearsToRetirement: JsonNumber
