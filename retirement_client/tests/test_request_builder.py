from __future__ import annotations

import pytest
from pydantic import ValidationError

from retirement_client.core.request_builder import build_request
from retirement_client.schemas.calculation import LifestyleType

from retirement_client.tests.fakes import valid_form


def test_string_ages_are_coerced_to_numbers():
    request = build_request(valid_form())

    assert request.currentAge == 30
    assert request.retirementAge == 65
    assert isinstance(request.currentAge, int)
    assert request.to_payload() == {
        "currentAge": 30,
        "retirementAge": 65,
        "lifestyleType": "simple",
    }


def test_lifestyle_defaults_to_simple():
    form = {"currentAge": "40", "retirementAge": "67"}

    assert build_request(form).lifestyleType is LifestyleType.SIMPLE


def test_custom_interest_rate_is_sent_when_present():
    form = {**valid_form(), "lifestyleType": "fancy", "customInterestRate": "6.5"}

    payload = build_request(form).to_payload()

    assert payload["lifestyleType"] == "fancy"
    assert payload["customInterestRate"] == 6.5


def test_request_is_immutable():
    request = build_request(valid_form())

    with pytest.raises(ValidationError):
        request.currentAge = 50
