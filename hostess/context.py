"""
Immutable per-process context shared by the webhook handlers.

The context is built once, before the server accepts connections, and reaches
each request through FastAPI dependency injection rather than module globals.
"""

import logging
from dataclasses import dataclass

from fastapi import Request

from hostess.config.constants import LOGGER_NAME
from hostess.config.settings import Settings
from hostess.models.conversation import CallSessionManager
from hostess.models.knowledge import KnowledgeRecord, load_knowledge
from hostess.services.completion_client import CompletionClient
from hostess.services.prompt_builder import build_system_instruction

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class AssistantContext:
    """Everything a webhook handler needs to answer a call."""

    settings: Settings
    knowledge: KnowledgeRecord
    system_instruction: str
    completion_client: CompletionClient
    sessions: CallSessionManager


def build_context(settings: Settings) -> AssistantContext:
    """
    Load the knowledge record and wire up the completion client.

    Args:
        settings: Resolved process settings

    Returns:
        AssistantContext: Fully formed context, ready to serve requests
    """
    knowledge = load_knowledge(settings.knowledge_path)
    instruction = build_system_instruction(knowledge, settings.assistant_name)
    completion_client = CompletionClient.from_api_key(
        settings.openai_api_key,
        instruction,
        model=settings.model,
        temperature=settings.temperature,
    )
    sessions = CallSessionManager(
        history_turns=settings.history_turns,
        max_active_calls=settings.max_active_calls,
    )
    logger.info(
        f"Assistant context ready for {knowledge.name} "
        f"(model={settings.model}, history_turns={settings.history_turns})"
    )
    return AssistantContext(
        settings=settings,
        knowledge=knowledge,
        system_instruction=instruction,
        completion_client=completion_client,
        sessions=sessions,
    )


def get_context(request: Request) -> AssistantContext:
    """FastAPI dependency returning the context attached at startup."""
    return request.app.state.context
