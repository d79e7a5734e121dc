"""
Handlers module for the Twilio voice webhooks.

Key components:
- voice_handlers: Builds TwiML for the start of a call, for each transcribed
  speech turn, and for unexpected failures, and releases call sessions when
  Twilio reports that a call ended.

Usage examples:
```python
from hostess.handlers.voice_handlers import build_call_start_response, handle_speech_turn

twiml = build_call_start_response(context)
print(str(twiml))

reply = await handle_speech_turn("What time do you open?", "CA123", context)
```
"""

# Handlers module initialization
