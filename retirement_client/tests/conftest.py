from __future__ import annotations

import logging

import pytest

from retirement_client.tests.fakes import SUCCESS_BODY, FakeCalculator, respond_json


@pytest.fixture()
def calculator() -> FakeCalculator:
    return respond_json(SUCCESS_BODY)


@pytest.fixture(autouse=True)
def _restore_logging():
    """``configure_logging`` rewires the root logger; put it back after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("retirement_client")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
