"""
FastAPI server for the Agentic Hostess Twilio voice webhook.

This module initializes the FastAPI application that Twilio calls during a phone
call. It exposes the call-start and speech-turn webhooks, a call status
callback, and a plaintext health check. The assistant context (knowledge
record, system instruction, OpenAI client) is built once at startup before the
server accepts traffic.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import dotenv
from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import PlainTextResponse, Response
from twilio.twiml.voice_response import VoiceResponse

from hostess.config.constants import (
    DEFAULT_VOICE,
    HEALTH_MESSAGE,
    ROUTE_CALL_START,
    ROUTE_CALL_STATUS,
    ROUTE_HEALTH,
    ROUTE_SPEECH_TURN,
    TWIML_MEDIA_TYPE,
)
from hostess.config.logging_config import configure_logging
from hostess.config.settings import ConfigurationError, Settings
from hostess.context import AssistantContext, build_context, get_context
from hostess.handlers.voice_handlers import (
    build_call_start_response,
    build_error_response,
    handle_call_status,
    handle_speech_turn,
)

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

logger = configure_logging()

router = APIRouter()


def twiml_response(twiml: VoiceResponse) -> Response:
    """Serialize a VoiceResponse into an HTTP response Twilio accepts."""
    return Response(content=str(twiml), media_type=TWIML_MEDIA_TYPE)


@router.get(ROUTE_HEALTH, response_class=PlainTextResponse)
async def health_check():
    """Health check endpoint; always returns the same plaintext body."""
    return HEALTH_MESSAGE


@router.post(ROUTE_CALL_START)
async def call_start(context: AssistantContext = Depends(get_context)):
    """Twilio voice webhook for an incoming call; greets and gathers speech."""
    logger.info("/voice webhook hit")
    return twiml_response(build_call_start_response(context))


@router.post(ROUTE_SPEECH_TURN)
async def speech_turn(
    SpeechResult: Optional[str] = Form(None),
    CallSid: Optional[str] = Form(None),
    context: AssistantContext = Depends(get_context),
):
    """Twilio gather action; answers one transcribed caller utterance."""
    twiml = await handle_speech_turn(SpeechResult, CallSid, context)
    return twiml_response(twiml)


@router.post(ROUTE_CALL_STATUS, status_code=204)
async def call_status(
    CallSid: Optional[str] = Form(None),
    CallStatus: Optional[str] = Form(None),
    context: AssistantContext = Depends(get_context),
):
    """Twilio status callback; releases the call's session when it ends."""
    handle_call_status(CallSid, CallStatus, context)
    return Response(status_code=204)


async def unexpected_error(request: Request, exc: Exception):
    """Answer any unhandled error with TwiML so the caller is not left in silence."""
    logger.exception(f"Unhandled error while serving {request.url.path}: {exc}")
    context = getattr(request.app.state, "context", None)
    voice = context.settings.voice if context is not None else DEFAULT_VOICE
    return twiml_response(build_error_response(voice))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the assistant context from the environment before serving requests."""
    if getattr(app.state, "context", None) is None:
        try:
            settings = Settings.from_env()
        except ConfigurationError as e:
            logger.error(f"Cannot start: {e}")
            raise
        app.state.context = build_context(settings)
    yield


def create_app(context: Optional[AssistantContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Prebuilt assistant context; when omitted it is built from the
            environment during startup

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(
        title="Agentic Hostess",
        description="Twilio voice webhook answering restaurant calls with OpenAI",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = context
    app.include_router(router)
    app.add_exception_handler(Exception, unexpected_error)
    return app


app = create_app()

