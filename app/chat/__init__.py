"""
Chat module for follow-up questions about summarized documents.
"""

from .services import ChatService
from .factory import create_chat_module

__all__ = ["ChatService", "create_chat_module"]
