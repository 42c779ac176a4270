"""
chat_session.py - Follow-up chat state machine

A ChatSession owns the visible message list of one chat view and one
remote chat context. State moves idle -> sending -> idle | errored; while
a call is in flight further sends and retries are dropped, not queued.
"""

import logging
import threading
from datetime import datetime
from typing import List, Optional

from .models import ChatMessage, ChatRole, ChatState

_LOG = logging.getLogger("chat_session")

DEFAULT_GREETING = "Hello! I am your AI assistant. How can I help you today?"
DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a helpful AI assistant. You can answer questions about concepts from "
    "the summarized documents, explain terminology, or discuss the documents' content. "
    "Always provide information for educational purposes and not as professional advice."
)
SEND_FAILURE_MESSAGE = (
    "Sorry, I encountered an error. Please check your connection and try again."
)
RETRY_FAILURE_MESSAGE = "The retry also failed. Please try again later."


class ChatSession:
    """Single-flight chat session bound to one remote conversation."""

    def __init__(
        self,
        client,
        system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION,
        greeting: str = DEFAULT_GREETING,
        resend_history: bool = True,
        allow_send_after_error: bool = False,
    ):
        self.client = client
        self.system_instruction = system_instruction
        self.greeting = greeting
        self.resend_history = resend_history
        self.allow_send_after_error = allow_send_after_error
        self.created_at = datetime.now()
        self.last_active_at = self.created_at

        self._lock = threading.Lock()
        self._remote = None
        self._messages: List[ChatMessage] = []
        self._state = ChatState.IDLE

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ChatState:
        with self._lock:
            return self._state

    @property
    def messages(self) -> List[ChatMessage]:
        """Copy of the visible history in append order."""
        with self._lock:
            return list(self._messages)

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._remote is not None

    @property
    def has_error(self) -> bool:
        with self._lock:
            return any(m.error for m in self._messages)

    @property
    def last_user_message(self) -> Optional[ChatMessage]:
        with self._lock:
            return self._last_user_message()

    def _last_user_message(self) -> Optional[ChatMessage]:
        for message in reversed(self._messages):
            if message.role == ChatRole.USER:
                return message
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Open the remote conversation and seed the greeting."""
        with self._lock:
            if self._remote is not None:
                return
            self._remote = self.client.create_chat(
                self.system_instruction, resend_history=self.resend_history
            )
            self._messages = [ChatMessage(role=ChatRole.MODEL, text=self.greeting)]
            self._state = ChatState.IDLE
        _LOG.debug("Chat session initialized")

    def send(self, text: str) -> Optional[ChatMessage]:
        """Send a user message.

        Returns:
            The model message appended for this exchange, or None when the
            call was dropped (blank text, no session, or not idle)
        """
        if not text or not text.strip():
            return None

        with self._lock:
            if self._remote is None or self._state == ChatState.SENDING:
                return None
            if self._state == ChatState.ERRORED and not self.allow_send_after_error:
                return None
            self._messages.append(ChatMessage(role=ChatRole.USER, text=text))
            self._state = ChatState.SENDING
            remote = self._remote

        return self._exchange(remote, text, SEND_FAILURE_MESSAGE)

    def retry(self) -> Optional[ChatMessage]:
        """Resend the most recent user message after dropping error replies."""
        with self._lock:
            if self._remote is None or self._state == ChatState.SENDING:
                return None
            last = self._last_user_message()
            if last is None:
                return None
            self._messages = [m for m in self._messages if not m.error]
            self._state = ChatState.SENDING
            remote = self._remote

        return self._exchange(remote, last.text, RETRY_FAILURE_MESSAGE)

    def close(self) -> None:
        """Tear the session down; replies still in flight are ignored."""
        with self._lock:
            self._remote = None
            self._state = ChatState.IDLE
        _LOG.debug("Chat session closed")

    def _exchange(self, remote, text: str, failure_text: str) -> Optional[ChatMessage]:
        # The remote call runs outside the lock; the SENDING state keeps it single-flight.
        try:
            reply = remote.send(text)
            message = ChatMessage(role=ChatRole.MODEL, text=reply)
            next_state = ChatState.IDLE
        except Exception as e:
            _LOG.warning("Chat exchange failed: %s", e)
            message = ChatMessage(role=ChatRole.MODEL, text=failure_text, error=True)
            next_state = ChatState.ERRORED

        with self._lock:
            if self._remote is not remote:
                _LOG.info("Discarding chat reply for a session that was closed")
                return None
            self._messages.append(message)
            self._state = next_state
            self.last_active_at = datetime.now()
        return message

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        with self._lock:
            return {
                "state": self._state.value,
                "messages": [m.to_dict() for m in self._messages],
            }
