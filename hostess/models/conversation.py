"""
Call session state for Twilio voice calls.

This module provides the CallSessionManager class which tracks the recent
exchanges of each active call, keyed by the Twilio CallSid. Retention is
optional: with ``history_turns`` set to 0 the manager records nothing and
every speech turn is answered independently.
"""

import logging
from collections import OrderedDict, deque
from typing import Deque, Dict, List, Optional

from hostess.config.constants import LOGGER_NAME
from hostess.models.completion import ConversationTurn, MessageRole

logger = logging.getLogger(LOGGER_NAME)


class CallSessionManager:
    """
    Manages recent conversation turns for active calls.

    Each call keeps at most ``history_turns`` caller/assistant exchanges. At most
    ``max_active_calls`` calls are tracked; adding a new call beyond that evicts
    the call that was least recently active.
    """

    def __init__(self, history_turns: int = 0, max_active_calls: int = 1000):
        """Initialize an empty registry of call sessions."""
        self.history_turns = history_turns
        self.max_active_calls = max_active_calls
        self.active_sessions: "OrderedDict[str, Deque[ConversationTurn]]" = OrderedDict()

    @property
    def enabled(self) -> bool:
        return self.history_turns > 0

    def record_exchange(self, call_sid: Optional[str], caller_text: str, reply_text: str):
        """
        Record one caller utterance and the assistant's reply for a call.

        Args:
            call_sid: Twilio call identifier; nothing is recorded when absent
            caller_text: What the caller said
            reply_text: What the assistant answered
        """
        if not self.enabled or not call_sid:
            return

        turns = self.active_sessions.get(call_sid)
        if turns is None:
            turns = deque(maxlen=self.history_turns * 2)
            self.active_sessions[call_sid] = turns
            self._evict_oldest()
        else:
            self.active_sessions.move_to_end(call_sid)

        turns.append(ConversationTurn(role=MessageRole.USER, content=caller_text))
        turns.append(ConversationTurn(role=MessageRole.ASSISTANT, content=reply_text))

    def get_history(self, call_sid: Optional[str]) -> List[ConversationTurn]:
        """
        Get the retained turns for a call, oldest first.

        Args:
            call_sid: Twilio call identifier

        Returns:
            List of turns, empty when the call is unknown or retention is disabled
        """
        if not call_sid:
            return []
        return list(self.active_sessions.get(call_sid, ()))

    def remove_session(self, call_sid: str):
        """
        Remove a call from the registry.

        Args:
            call_sid: Twilio call identifier of the call to remove
        """
        if call_sid in self.active_sessions:
            del self.active_sessions[call_sid]
            logger.debug(f"Removed session for call {call_sid}")

    def get_all_sessions(self) -> Dict[str, List[ConversationTurn]]:
        """
        Get all retained sessions.

        Returns:
            Dictionary mapping CallSids to their retained turns
        """
        return {sid: list(turns) for sid, turns in self.active_sessions.items()}

    def _evict_oldest(self):
        while len(self.active_sessions) > self.max_active_calls:
            call_sid, _ = self.active_sessions.popitem(last=False)
            logger.warning(f"Session limit reached, evicted call {call_sid}")
