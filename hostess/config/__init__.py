"""
Configuration module for the Agentic Hostess webhook.

This module provides centralized configuration management for the application,
including constants, logging setup, and environment-based settings.

Key components:
- constants: Spoken prompts, webhook routes, and default model settings.
- logging_config: Console and rotating file logging for the application logger.
- settings: The immutable ``Settings`` object read from the environment at startup.

Usage examples:
```python
from hostess.config.constants import LOGGER_NAME, ROUTE_SPEECH_TURN
from hostess.config.logging_config import configure_logging
from hostess.config.settings import Settings

logger = configure_logging()
settings = Settings.from_env()
logger.info("Using model %s", settings.model)
```
"""
