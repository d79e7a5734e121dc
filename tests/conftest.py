import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from hostess.config.settings import Settings
from hostess.context import AssistantContext
from hostess.models.completion import CompletionSuccess
from hostess.models.conversation import CallSessionManager
from hostess.models.knowledge import KnowledgeRecord
from hostess.services.completion_client import CompletionClient
from hostess.services.prompt_builder import build_system_instruction


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def settings():
    return Settings(openai_api_key="test-api-key")


@pytest.fixture
def knowledge():
    return KnowledgeRecord(name="Luna Bistro", hours="5pm-10pm")


@pytest.fixture
def completion_client():
    """A CompletionClient stand-in whose reply is always 'We open at 5 PM!'."""
    client = MagicMock(spec=CompletionClient)
    client.generate_reply = AsyncMock(return_value=CompletionSuccess(text="We open at 5 PM!"))
    return client


@pytest.fixture
def make_context(settings, knowledge, completion_client):
    def _make(history_turns=0, **overrides):
        values = dict(
            settings=settings,
            knowledge=knowledge,
            system_instruction=build_system_instruction(knowledge),
            completion_client=completion_client,
            sessions=CallSessionManager(history_turns=history_turns),
        )
        values.update(overrides)
        return AssistantContext(**values)

    return _make


@pytest.fixture
def context(make_context):
    return make_context()
