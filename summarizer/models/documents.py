"""
Document-related data models.

This module contains the summary mode enum and the Pydantic model for
uploaded source documents.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..exceptions import InvalidModeError

TEXT_MEDIA_TYPE = "text/plain"
EXTRACTABLE_MEDIA_TYPES = ("application/pdf", "image/jpeg", "image/png")
ACCEPTED_MEDIA_TYPES = (TEXT_MEDIA_TYPE,) + EXTRACTABLE_MEDIA_TYPES


class SummaryMode(str, Enum):
    """Focus of a summarization request."""

    LEGAL = "LEGAL"
    FINANCIAL = "FINANCIAL"
    DUAL = "DUAL"

    @classmethod
    def parse(cls, value: Optional[str], default: "SummaryMode" = None) -> "SummaryMode":
        """Parse a mode name case-insensitively.

        Raises:
            InvalidModeError: If the value names no known mode
        """
        if value is None or not str(value).strip():
            return default or cls.LEGAL
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise InvalidModeError(f'Unknown summary mode "{value}". Choose one of: {allowed}.')


def normalize_media_type(media_type: Optional[str]) -> str:
    """Strip parameters such as charset and lowercase the type."""
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()


class SourceDocument(BaseModel):
    """A named byte payload supplied by the user."""
    name: str = Field(description="Original file name")
    media_type: str = Field(description="Declared media type of the upload")
    data: bytes = Field(default=b"", description="Raw file content")

    @property
    def base_media_type(self) -> str:
        return normalize_media_type(self.media_type)

    @property
    def is_plain_text(self) -> bool:
        return self.base_media_type == TEXT_MEDIA_TYPE

    @property
    def needs_extraction(self) -> bool:
        return self.base_media_type in EXTRACTABLE_MEDIA_TYPES

    @property
    def is_supported(self) -> bool:
        return self.base_media_type in ACCEPTED_MEDIA_TYPES

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_upload(cls, upload) -> "SourceDocument":
        """Create a document from a werkzeug ``FileStorage``."""
        return cls(
            name=upload.filename or "upload",
            media_type=upload.mimetype or upload.content_type or "",
            data=upload.read(),
        )
