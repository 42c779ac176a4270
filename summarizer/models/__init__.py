"""
Models package for the summarizer.

This package contains the Pydantic models and enums shared by the
ingestion, summarization, chat and export components.
"""

from .documents import (
    SummaryMode,
    SourceDocument,
    normalize_media_type,
    TEXT_MEDIA_TYPE,
    EXTRACTABLE_MEDIA_TYPES,
    ACCEPTED_MEDIA_TYPES,
)

from .chat_models import (
    ChatRole,
    ChatState,
    ChatMessage,
)

from .export_models import ExportedFile

__all__ = [
    # Document models
    "SummaryMode",
    "SourceDocument",
    "normalize_media_type",
    "TEXT_MEDIA_TYPE",
    "EXTRACTABLE_MEDIA_TYPES",
    "ACCEPTED_MEDIA_TYPES",

    # Chat models
    "ChatRole",
    "ChatState",
    "ChatMessage",

    # Export models
    "ExportedFile",
]
