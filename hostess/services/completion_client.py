"""
OpenAI chat completion client for caller utterances.

``CompletionClient`` issues one chat completion request per speech turn and
reports the outcome as a ``CompletionResult``. It never raises for provider or
network problems: those come back as ``CompletionFailure`` so the webhook can
answer with a spoken apology.
"""

import logging
import time
from typing import Iterable, List, Optional

from openai import AsyncOpenAI

from hostess.config.constants import (
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_TEMPERATURE,
    EMPTY_UTTERANCE_PLACEHOLDER,
    FALLBACK_REPLY,
    LOGGER_NAME,
)
from hostess.models.completion import (
    CompletionFailure,
    CompletionResult,
    CompletionSuccess,
    ConversationTurn,
    MessageRole,
)

logger = logging.getLogger(LOGGER_NAME)


class CompletionClient:
    """
    Client that turns a caller utterance into a spoken reply via OpenAI.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        system_instruction: str,
        model: str = DEFAULT_COMPLETION_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self.client = client
        self.system_instruction = system_instruction
        self.model = model
        self.temperature = temperature
        logger.info(f"CompletionClient initialized with model: {model}")

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        system_instruction: str,
        model: str = DEFAULT_COMPLETION_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> "CompletionClient":
        """Create a client backed by a new ``AsyncOpenAI`` instance."""
        return cls(AsyncOpenAI(api_key=api_key), system_instruction, model, temperature)

    def build_messages(
        self, utterance: str, history: Iterable[ConversationTurn] = ()
    ) -> List[ConversationTurn]:
        """
        Assemble the conversation sent to the model.

        Args:
            utterance: What the caller said; may be empty
            history: Earlier turns of the same call, oldest first

        Returns:
            The system instruction, the history, then the caller's utterance
        """
        turns = [ConversationTurn(role=MessageRole.SYSTEM, content=self.system_instruction)]
        turns.extend(history)
        turns.append(
            ConversationTurn(
                role=MessageRole.USER,
                content=utterance or EMPTY_UTTERANCE_PLACEHOLDER,
            )
        )
        return turns

    async def generate_reply(
        self,
        utterance: str,
        history: Iterable[ConversationTurn] = (),
        call_sid: Optional[str] = None,
    ) -> CompletionResult:
        """
        Request a reply for one caller utterance.

        Args:
            utterance: Transcribed caller speech
            history: Earlier turns of the same call, oldest first
            call_sid: Twilio call identifier, used for logging only

        Returns:
            CompletionSuccess with the trimmed reply (or the fallback prompt when
            the model returns no text), or CompletionFailure with the exception
        """
        messages = [turn.to_message() for turn in self.build_messages(utterance, history)]

        start_time = time.time()
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
            )
            content = completion.choices[0].message.content if completion.choices else None
        except Exception as e:
            logger.error(f"Error talking to OpenAI for call {call_sid}: {e}")
            return CompletionFailure(cause=e)

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug(f"OpenAI completion for call {call_sid} took {elapsed_ms:.0f} ms")

        reply = content.strip() if isinstance(content, str) else ""
        if not reply:
            logger.warning(f"OpenAI returned no text for call {call_sid}, using fallback reply")
            reply = FALLBACK_REPLY
        return CompletionSuccess(text=reply)
