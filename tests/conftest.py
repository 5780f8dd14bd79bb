"""Shared fixtures."""

import pytest

from fitdash.core.chat import ChatSession
from fitdash.core.dashboard import Dashboard

from .fakes import EchoChatService


@pytest.fixture
def echo_service():
    return EchoChatService()


@pytest.fixture
def dashboard(echo_service):
    """A dashboard whose chat answers with an echo."""
    return Dashboard(chat=ChatSession(echo_service, timeout=1.0))
