"""
Models module for data structures and state management in the hostess webhook.

Key components:
- knowledge: The restaurant ``KnowledgeRecord`` and its startup loader.
- completion: Chat message and completion result types exchanged with OpenAI.
- conversation: Optional per-call history keyed by Twilio CallSid.

Usage examples:
```python
from hostess.models.knowledge import load_knowledge
from hostess.models.conversation import CallSessionManager

knowledge = load_knowledge("data/restaurant.json")
sessions = CallSessionManager(history_turns=3)
sessions.record_exchange("CA123", "Do you take reservations?", "We do!")
```
"""

from hostess.models.completion import (
    CompletionFailure,
    CompletionResult,
    CompletionSuccess,
    ConversationTurn,
    MessageRole,
)
from hostess.models.conversation import CallSessionManager
from hostess.models.knowledge import KnowledgeRecord, load_knowledge
