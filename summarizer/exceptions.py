"""
exceptions.py - Error taxonomy for the summarizer

Ingestion problems are rejected locally before any remote call, extraction
failures abort a whole upload batch. Summarization and chat failures are not
represented here because they never raise.
"""

from typing import Optional

ACCEPTED_TYPES_HINT = ".txt, .pdf, .jpg, or .png"
EMPTY_INPUT_MESSAGE = "Please provide text or a supported document to summarize."


class SummarizerError(Exception):
    """Base exception for summarizer errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class IngestionError(SummarizerError):
    """Raised when user input is rejected before reaching the model."""
    pass


class UnsupportedFileTypeError(IngestionError):
    """Raised when an uploaded file has a media type we cannot read."""

    def __init__(self, filename: str, media_type: str):
        super().__init__(
            f'File type for "{filename}" is not supported. Please use {ACCEPTED_TYPES_HINT}.'
        )
        self.filename = filename
        self.media_type = media_type


class UploadLimitError(IngestionError):
    """Raised when an upload batch exceeds the configured limits."""
    pass


class EmptyInputError(IngestionError):
    """Raised when neither files nor pasted text carry any content."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class InvalidModeError(IngestionError):
    """Raised when the requested summary mode is unknown."""
    pass


class ExtractionError(SummarizerError):
    """Raised when the model fails to extract text from a file."""

    def __init__(self, filename: str, original_error: Optional[Exception] = None):
        super().__init__(
            f'Failed to process file "{filename}". '
            "The file type may be unsupported or the file could be corrupt.",
            original_error=original_error,
        )
        self.filename = filename
