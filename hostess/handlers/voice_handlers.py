"""
Twilio voice webhook handlers.

Each handler returns a ``VoiceResponse`` ready to be serialized as TwiML. The
call-start handler greets the caller and opens a speech gather; the
speech-turn handler answers one transcribed utterance and, on success, gathers
the next one. Every branch produces a complete TwiML document so the call leg
never goes silent.
"""

import logging
from typing import Optional

from twilio.twiml.voice_response import VoiceResponse

from hostess.config.constants import (
    CONTINUATION_PROMPT,
    LOGGER_NAME,
    NO_SPEECH_MESSAGE,
    OPENING_PROMPT,
    ROUTE_CALL_START,
    ROUTE_SPEECH_TURN,
    TERMINAL_CALL_STATUSES,
    TROUBLE_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
)
from hostess.context import AssistantContext
from hostess.models.completion import CompletionFailure, CompletionSuccess

logger = logging.getLogger(LOGGER_NAME)


def _gather_speech(response: VoiceResponse, prompt: str, voice: str):
    """Append a speech gather posting to the speech-turn route, then a redirect to call start."""
    gather = response.gather(
        input="speech",
        action=ROUTE_SPEECH_TURN,
        method="POST",
        speech_timeout="auto",
    )
    gather.say(prompt, voice=voice)
    # Callers who stay silent fall through to here and are greeted again
    response.redirect(ROUTE_CALL_START)


def build_call_start_response(context: AssistantContext) -> VoiceResponse:
    """
    Build the TwiML for the start of a call.

    Args:
        context: Shared assistant context

    Returns:
        VoiceResponse: Greeting, a speech gather with the opening prompt, and a
        fallback redirect to the call-start route
    """
    voice = context.settings.voice
    response = VoiceResponse()
    response.say(
        f"Hi, this is {context.settings.assistant_name} for {context.knowledge.name}.",
        voice=voice,
    )
    _gather_speech(response, OPENING_PROMPT, voice)
    return response


async def handle_speech_turn(
    speech_result: Optional[str],
    call_sid: Optional[str],
    context: AssistantContext,
) -> VoiceResponse:
    """
    Answer one transcribed caller utterance.

    Args:
        speech_result: Twilio's transcript of the caller's speech, if any
        call_sid: Twilio call identifier
        context: Shared assistant context

    Returns:
        VoiceResponse: The spoken reply and a new gather, a request to repeat
        when nothing was heard, or an apology when the model is unavailable
    """
    voice = context.settings.voice
    speech = (speech_result or "").strip()
    logger.info(f"Caller said (Twilio STT): {speech!r} [CallSid={call_sid}]")

    response = VoiceResponse()

    if not speech:
        response.say(NO_SPEECH_MESSAGE, voice=voice)
        response.redirect(ROUTE_CALL_START)
        return response

    history = context.sessions.get_history(call_sid)
    result = await context.completion_client.generate_reply(
        speech, history=history, call_sid=call_sid
    )

    if isinstance(result, CompletionSuccess):
        logger.info(f"Agentic Hostess reply: {result.text!r} [CallSid={call_sid}]")
        context.sessions.record_exchange(call_sid, speech, result.text)
        response.say(result.text, voice=voice)
        _gather_speech(response, CONTINUATION_PROMPT, voice)
    elif isinstance(result, CompletionFailure):
        logger.error(
            f"Completion failed during speech turn [CallSid={call_sid}]: {result.cause!r}"
        )
        response.say(TROUBLE_MESSAGE, voice=voice)
    else:
        raise TypeError(f"Unexpected completion result: {result!r}")

    return response


def handle_call_status(
    call_sid: Optional[str], call_status: Optional[str], context: AssistantContext
) -> bool:
    """
    Process a Twilio call status callback.

    Args:
        call_sid: Twilio call identifier
        call_status: Twilio CallStatus value (e.g. 'in-progress', 'completed')
        context: Shared assistant context

    Returns:
        bool: True if the call ended and its session was released
    """
    status = (call_status or "").lower()
    logger.info(f"Call status update: {status or 'unknown'} [CallSid={call_sid}]")
    if call_sid and status in TERMINAL_CALL_STATUSES:
        context.sessions.remove_session(call_sid)
        return True
    return False


def build_error_response(voice: str) -> VoiceResponse:
    """TwiML returned when a handler fails unexpectedly."""
    response = VoiceResponse()
    response.say(UNEXPECTED_ERROR_MESSAGE, voice=voice)
    response.pause(length=1)
    response.redirect(ROUTE_CALL_START)
    return response
