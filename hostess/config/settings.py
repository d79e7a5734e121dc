"""
Environment-based settings for the hostess webhook.

Settings are read once at process start into an immutable ``Settings``
instance. The OpenAI API key is the only required value; every other
setting has a default suited to a local Twilio tunnel.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from hostess.config.constants import (
    DEFAULT_ASSISTANT_NAME,
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_KNOWLEDGE_PATH,
    DEFAULT_PORT,
    DEFAULT_TEMPERATURE,
    DEFAULT_VOICE,
)


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot produce a usable configuration."""


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, fixed for the lifetime of the server."""

    openai_api_key: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    knowledge_path: str = DEFAULT_KNOWLEDGE_PATH
    model: str = DEFAULT_COMPLETION_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    assistant_name: str = DEFAULT_ASSISTANT_NAME
    voice: str = DEFAULT_VOICE
    history_turns: int = 0
    max_active_calls: int = 1000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (used by tests)

        Returns:
            Settings: The resolved configuration

        Raises:
            ConfigurationError: If OPENAI_API_KEY is missing or a numeric
                variable cannot be parsed
        """
        env = os.environ if env is None else env

        api_key = (env.get("OPENAI_API_KEY") or "").strip()
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set")

        history_turns = _read_int(env, "HISTORY_TURNS", 0)
        max_active_calls = _read_int(env, "MAX_ACTIVE_CALLS", 1000)
        if history_turns < 0:
            raise ConfigurationError("HISTORY_TURNS cannot be negative")
        if max_active_calls < 1:
            raise ConfigurationError("MAX_ACTIVE_CALLS must be at least 1")

        return cls(
            openai_api_key=api_key,
            host=env.get("HOST") or "0.0.0.0",
            port=_read_int(env, "PORT", DEFAULT_PORT),
            knowledge_path=env.get("KNOWLEDGE_PATH") or DEFAULT_KNOWLEDGE_PATH,
            model=env.get("OPENAI_MODEL") or DEFAULT_COMPLETION_MODEL,
            temperature=_read_float(env, "OPENAI_TEMPERATURE", DEFAULT_TEMPERATURE),
            assistant_name=env.get("ASSISTANT_NAME") or DEFAULT_ASSISTANT_NAME,
            voice=env.get("VOICE") or DEFAULT_VOICE,
            history_turns=history_turns,
            max_active_calls=max_active_calls,
        )
