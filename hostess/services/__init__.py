"""
Services module for external API integrations in the hostess webhook.

Key components:
- prompt_builder: Builds the static system instruction from the knowledge record.
- completion_client: Wraps the OpenAI chat completion endpoint and returns an
  explicit success or failure result for each caller utterance.

Usage examples:
```python
from hostess.models.knowledge import load_knowledge
from hostess.services.completion_client import CompletionClient
from hostess.services.prompt_builder import build_system_instruction

instruction = build_system_instruction(load_knowledge("data/restaurant.json"))
client = CompletionClient.from_api_key("sk-...", instruction)
result = await client.generate_reply("What time do you open?")
```
"""

# Services module initialization
