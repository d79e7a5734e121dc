"""
Unit tests for the OpenAI chat completion client.

These tests verify the CompletionClient class, which sends one chat completion
request per caller utterance and reports the outcome as a result value.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hostess.models.completion import (
    CompletionFailure,
    CompletionSuccess,
    ConversationTurn,
    MessageRole,
)
from hostess.services.completion_client import CompletionClient


def make_completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def mock_openai():
    """Provide a mock AsyncOpenAI client."""
    openai_client = MagicMock()
    openai_client.chat.completions.create = AsyncMock(
        return_value=make_completion("  We open at 5 PM!  \n")
    )
    return openai_client


@pytest.fixture
def client(mock_openai):
    """Create a CompletionClient instance for testing."""
    return CompletionClient(mock_openai, "SYSTEM PROMPT", model="gpt-4o-mini", temperature=0.7)


@pytest.mark.asyncio
async def test_generate_reply_success(client, mock_openai):
    result = await client.generate_reply("What time do you open?", call_sid="CA123")

    assert result == CompletionSuccess(text="We open at 5 PM!")
    mock_openai.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o-mini",
        messages=[
            {"role": "system", "content": "SYSTEM PROMPT"},
            {"role": "user", "content": "What time do you open?"},
        ],
        temperature=0.7,
    )


@pytest.mark.asyncio
async def test_empty_utterance_uses_placeholder(client, mock_openai):
    await client.generate_reply("")

    messages = mock_openai.chat.completions.create.call_args.kwargs["messages"]
    assert messages[-1] == {"role": "user", "content": "The caller said nothing."}


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   \n"])
async def test_empty_reply_uses_fallback(client, mock_openai, content):
    mock_openai.chat.completions.create.return_value = make_completion(content)

    result = await client.generate_reply("Hello?")

    assert isinstance(result, CompletionSuccess)
    assert result.text == (
        "I'm sorry, I didn't catch that. "
        "How can I help you with your visit or reservation?"
    )


@pytest.mark.asyncio
async def test_no_choices_uses_fallback(client, mock_openai):
    mock_openai.chat.completions.create.return_value = SimpleNamespace(choices=[])

    result = await client.generate_reply("Hello?")

    assert isinstance(result, CompletionSuccess)
    assert result.text.startswith("I'm sorry, I didn't catch that.")


@pytest.mark.asyncio
async def test_provider_error_returns_failure(client, mock_openai):
    error = RuntimeError("connection reset")
    mock_openai.chat.completions.create.side_effect = error

    result = await client.generate_reply("Do you have parking?", call_sid="CA123")

    assert isinstance(result, CompletionFailure)
    assert result.cause is error


@pytest.mark.asyncio
async def test_malformed_response_returns_failure(client, mock_openai):
    mock_openai.chat.completions.create.return_value = SimpleNamespace(choices=[object()])

    result = await client.generate_reply("Do you have parking?")

    assert isinstance(result, CompletionFailure)
    assert isinstance(result.cause, AttributeError)


@pytest.mark.asyncio
async def test_history_is_sent_between_system_and_user(client, mock_openai):
    history = [
        ConversationTurn(role=MessageRole.USER, content="Table for two tonight?"),
        ConversationTurn(role=MessageRole.ASSISTANT, content="What time works for you?"),
    ]

    await client.generate_reply("Seven please", history=history)

    messages = mock_openai.chat.completions.create.call_args.kwargs["messages"]
    assert [m["role"] for m in messages] == ["system", "user", "assistant", "user"]
    assert messages[1]["content"] == "Table for two tonight?"
    assert messages[3]["content"] == "Seven please"


def test_from_api_key_builds_async_openai():
    with patch("hostess.services.completion_client.AsyncOpenAI") as mock_cls:
        client = CompletionClient.from_api_key("sk-test", "PROMPT", model="gpt-4o", temperature=0.1)

    mock_cls.assert_called_once_with(api_key="sk-test")
    assert client.client is mock_cls.return_value
    assert client.model == "gpt-4o"
    assert client.temperature == 0.1
    assert client.system_instruction == "PROMPT"
