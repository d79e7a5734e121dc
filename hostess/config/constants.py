"""
Constants and configuration values used throughout the application.

This module defines constants that are used across different parts of the application,
providing a centralized location for the spoken prompts, TwiML routes and default
model settings.
"""

# Logger name used throughout the application
LOGGER_NAME = "hostess"

# Default OpenAI chat completion settings
DEFAULT_COMPLETION_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7

# Identity and knowledge defaults
DEFAULT_ASSISTANT_NAME = "Agentic Hostess"
DEFAULT_BUSINESS_NAME = "The Restaurant"
DEFAULT_KNOWLEDGE_PATH = "data/restaurant.json"
DEFAULT_VOICE = "woman"
DEFAULT_PORT = 3000

# Webhook routes
ROUTE_HEALTH = "/"
ROUTE_CALL_START = "/voice"
ROUTE_SPEECH_TURN = "/gather"
ROUTE_CALL_STATUS = "/status"

# TwiML content type
TWIML_MEDIA_TYPE = "text/xml"

# Fixed spoken text
HEALTH_MESSAGE = "Agentic Hostess API (Twilio + restaurant knowledge) running"
OPENING_PROMPT = (
    "How can I help you today? You can ask about our hours, location, menu, "
    "or make a reservation."
)
CONTINUATION_PROMPT = (
    "You can ask another question, continue your reservation, "
    "or say 'that's all' to finish."
)
NO_SPEECH_MESSAGE = "I'm sorry, I didn't hear anything. Could you please repeat that?"
TROUBLE_MESSAGE = "Sorry, I'm having trouble right now. Please call back a little later."
UNEXPECTED_ERROR_MESSAGE = "Sorry, we hit a snag."
EMPTY_UTTERANCE_PLACEHOLDER = "The caller said nothing."
FALLBACK_REPLY = (
    "I'm sorry, I didn't catch that. "
    "How can I help you with your visit or reservation?"
)

# Twilio CallStatus values after which a call can no longer reach /gather
TERMINAL_CALL_STATUSES = frozenset(
    {"completed", "busy", "failed", "no-answer", "canceled"}
)
