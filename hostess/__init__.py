"""
Agentic Hostess - Twilio voice webhook backed by OpenAI chat completions

This application answers restaurant phone calls. Twilio transcribes the caller's
speech and posts it to the webhook; the webhook asks an OpenAI chat model for a
short reply grounded in a local knowledge file and returns TwiML telling Twilio
what to say and what to listen for next.

Architecture Overview:
- FastAPI server exposing the Twilio voice webhooks
- Static knowledge record and system instruction built once at startup
- One OpenAI chat completion per caller utterance
- TwiML rendered with the Twilio helper library

Key Components:
- config: Constants, logging setup, and environment settings
- models: Knowledge record, completion result types, and optional call sessions
- services: System instruction builder and OpenAI completion client
- handlers: TwiML builders for call start, speech turns, and status callbacks
- context: The immutable context handed to every request
- main: The FastAPI application

Getting Started:
1. Set up environment variables:
   - OPENAI_API_KEY: Your OpenAI API key (required)
   - PORT: Port to run the server on (default 3000)
   - KNOWLEDGE_PATH: Restaurant knowledge file (default data/restaurant.json)

2. Start the server:
   ```bash
   python run.py
   ```

3. Point the Twilio phone number's voice webhook to http://your-server:3000/voice
   (HTTP POST) and, optionally, its status callback to /status.
"""
