"""
file_ingestion.py - Turning uploads into source text

Plain-text files are decoded locally; PDFs and images are read by the
remote model. Each file becomes one delimited block, and the blocks plus
any pasted text form the combined text handed to the prompt builder.
"""

import logging
from typing import Iterable, List, Optional

from .exceptions import UnsupportedFileTypeError, UploadLimitError
from .models import SourceDocument
from .summary_generator import extract_text

_LOG = logging.getLogger("file_ingestion")

USER_TEXT_DELIMITER = "--- USER TEXT ---"
BLOCK_SEPARATOR = "\n\n"


def wrap_block(name: str, text: str, extracted: bool = False) -> str:
    """Wrap *text* between start/end lines naming its source file."""
    label = f"OCR'd {name}" if extracted else name
    return f"--- START OF {label} ---\n{text}\n--- END OF {label} ---"


def read_plain_text(document: SourceDocument) -> str:
    """Decode a text/plain upload as UTF-8."""
    return document.data.decode("utf-8-sig", errors="replace")


def validate_documents(
    documents: List[SourceDocument],
    max_files: Optional[int] = None,
    max_file_size_mb: Optional[int] = None,
) -> None:
    """Reject a batch before any file is read.

    Raises:
        UploadLimitError: If the batch or a file is too large
        UnsupportedFileTypeError: On the first file with an unaccepted media type
    """
    if max_files and len(documents) > max_files:
        raise UploadLimitError(
            f"Too many files: {len(documents)} uploaded, at most {max_files} allowed."
        )

    for document in documents:
        if not document.is_supported:
            raise UnsupportedFileTypeError(document.name, document.media_type)
        if max_file_size_mb and document.size > max_file_size_mb * 1024 * 1024:
            raise UploadLimitError(
                f'File "{document.name}" is too large: '
                f"{document.size / (1024 * 1024):.1f}MB exceeds limit of {max_file_size_mb}MB."
            )


def ingest_documents(
    documents: Iterable[SourceDocument],
    client,
    max_files: Optional[int] = None,
    max_file_size_mb: Optional[int] = None,
) -> List[str]:
    """Produce one wrapped text block per document, in input order.

    The batch is all-or-nothing: any rejection or extraction failure
    propagates and the blocks gathered so far are dropped.
    """
    documents = list(documents)
    validate_documents(documents, max_files=max_files, max_file_size_mb=max_file_size_mb)

    blocks: List[str] = []
    for document in documents:
        if document.is_plain_text:
            blocks.append(wrap_block(document.name, read_plain_text(document)))
        else:
            text = extract_text(document, client)
            blocks.append(wrap_block(document.name, text, extracted=True))

    _LOG.info("Ingested %d document(s)", len(blocks))
    return blocks


def combine_text(blocks: List[str], pasted_text: Optional[str] = "") -> str:
    """Join file blocks and pasted text into the text to summarize."""
    combined = BLOCK_SEPARATOR.join(blocks)
    if pasted_text and pasted_text.strip():
        if combined:
            combined = (
                f"{combined}{BLOCK_SEPARATOR}{USER_TEXT_DELIMITER}"
                f"{BLOCK_SEPARATOR}{pasted_text}"
            )
        else:
            combined = pasted_text
    return combined


class IngestionAdapter:
    """File ingestion bound to a client and upload limits."""

    def __init__(
        self,
        client,
        max_files: Optional[int] = None,
        max_file_size_mb: Optional[int] = None,
    ):
        self.client = client
        self.max_files = max_files
        self.max_file_size_mb = max_file_size_mb

    def ingest(self, documents: Iterable[SourceDocument]) -> List[str]:
        """Ingest documents using instance configuration."""
        return ingest_documents(
            documents,
            self.client,
            max_files=self.max_files,
            max_file_size_mb=self.max_file_size_mb,
        )

    def combine(self, documents: Iterable[SourceDocument], pasted_text: str = "") -> str:
        """Ingest documents and append the pasted text."""
        return combine_text(self.ingest(documents), pasted_text)
