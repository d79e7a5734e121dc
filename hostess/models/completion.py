"""
Chat completion message and result types.

``ConversationTurn`` mirrors one entry of the OpenAI chat ``messages`` list.
``CompletionSuccess`` and ``CompletionFailure`` form the result returned by
the completion client, so callers branch on a value instead of catching
exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict


class MessageRole(str, Enum):
    """Role of a participant in a conversation."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """A single chat message sent to the completion endpoint."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: MessageRole
    content: str

    def to_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CompletionSuccess:
    """Generated reply text, already trimmed and never empty."""
    text: str


@dataclass(frozen=True)
class CompletionFailure:
    """The completion request failed; ``cause`` is the original exception."""
    cause: BaseException


CompletionResult = Union[CompletionSuccess, CompletionFailure]
