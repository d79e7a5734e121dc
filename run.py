"""
Run script for starting the Agentic Hostess webhook server.

This script checks the required configuration, then starts the FastAPI server
with uvicorn. It refuses to start without an OpenAI API key.

Usage:
    python run.py [--port PORT] [--host HOST] [--log-level LEVEL]
"""

import argparse
import os
import sys
from pathlib import Path

import dotenv
import uvicorn

sys.path.append(str(Path(__file__).parent))

from hostess.config.constants import DEFAULT_PORT
from hostess.config.logging_config import configure_logging
from hostess.config.settings import ConfigurationError, Settings

env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

logger = configure_logging()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Start the Agentic Hostess Twilio webhook server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", str(DEFAULT_PORT))),
        help="Port to run the server on (default: 3000 or PORT env var)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the server to (default: 0.0.0.0 or HOST env var)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for starting the server."""
    args = parse_args(argv)
    # hostess.main configures logging again when uvicorn imports it
    os.environ["LOG_LEVEL"] = args.log_level
    configure_logging(args.log_level)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(f"{e}; refusing to start")
        sys.exit(1)

    logger.info(f"Starting server on http://{args.host}:{args.port}")
    logger.info(f"Knowledge file: {settings.knowledge_path}")
    logger.info(f"Completion model: {settings.model}")

    uvicorn.run(
        "hostess.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=os.getenv("ENV", "production").lower() == "development",
    )


if __name__ == "__main__":
    main()
