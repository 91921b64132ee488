"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from purchases.services import TicketService
from tests.doubles import RecordingPaymentProcessor, RecordingSeatReservationService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def ticket_service(calls: list) -> TicketService:
    return TicketService(
        RecordingPaymentProcessor(calls),
        RecordingSeatReservationService(calls),
    )
