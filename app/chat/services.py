"""
Chat services: registry of live chat sessions.
"""
import threading
import uuid
from datetime import datetime
from typing import Dict, Optional, Tuple
import logging

from summarizer import ChatSession

logger = logging.getLogger(__name__)


class ChatService:
    """Thread-safe registry mapping session ids to chat sessions.

    Each chat view mount creates one session; tearing the view down
    deletes it. Sessions share nothing with each other.
    """

    def __init__(self, client, chat_config=None, max_age_hours: int = 24):
        self.client = client
        self.chat_config = chat_config
        self.max_age_hours = max_age_hours
        self._lock = threading.Lock()
        self._sessions: Dict[str, ChatSession] = {}

    def _new_session(self) -> ChatSession:
        if self.chat_config is None:
            return ChatSession(self.client)
        return ChatSession(
            self.client,
            system_instruction=self.chat_config.system_instruction,
            greeting=self.chat_config.greeting,
            resend_history=self.chat_config.resend_history,
            allow_send_after_error=self.chat_config.allow_send_after_error,
        )

    def create_session(self) -> Tuple[str, ChatSession]:
        """Create and initialize a new chat session."""
        self.cleanup_expired()
        session = self._new_session()
        session.initialize()
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = session
        logger.info(f"Created chat session {session_id}")
        return session_id, session

    def get_session(self, session_id: str) -> Optional[ChatSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Tear down a chat session.

        Returns:
            True if a session was removed
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        logger.info(f"Closed chat session {session_id}")
        return True

    def cleanup_expired(self) -> int:
        """Close sessions idle for longer than ``max_age_hours``."""
        cutoff = datetime.now().timestamp() - (self.max_age_hours * 3600)
        with self._lock:
            expired = [
                sid for sid, session in self._sessions.items()
                if session.last_active_at.timestamp() < cutoff
            ]
            sessions = [self._sessions.pop(sid) for sid in expired]
        for session in sessions:
            session.close()
        if expired:
            logger.info(f"Cleaned up {len(expired)} expired chat sessions")
        return len(expired)

    @property
    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)
