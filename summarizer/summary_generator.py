"""
summary_generator.py - Calls to the remote model for extraction and summaries

Extraction failures raise ``ExtractionError`` and abort the upload batch,
while summarization failures degrade to a fixed message that is returned
to the caller. Neither call is retried.
"""

import base64
import logging
from typing import Optional

from .exceptions import ExtractionError
from .models import SourceDocument, SummaryMode
from .prompt_builder import PromptBuilder

_LOG = logging.getLogger("summary_generator")

EXTRACTION_INSTRUCTION = (
    "Extract all text from this document. Preserve formatting as much as possible."
)
EMPTY_DOCUMENT_MESSAGE = "Please provide the document to summarize."
SUMMARY_FAILURE_MESSAGE = (
    "An error occurred while generating the summaries. "
    "Please check the server logs for details."
)


def extract_text(document: SourceDocument, client) -> str:
    """Have the model read the text out of a PDF or image.

    Args:
        document: The uploaded file
        client: Remote capability exposing ``build_file_part`` and ``generate_content``

    Returns:
        The extracted text

    Raises:
        ExtractionError: If the remote call fails for any reason
    """
    data_b64 = base64.b64encode(document.data).decode("ascii")
    _LOG.info(
        "Extracting text from %s (%s, %d bytes)",
        document.name,
        document.base_media_type,
        document.size,
    )
    try:
        file_part = client.build_file_part(
            document.base_media_type, data_b64, filename=document.name
        )
        return client.generate_content(
            [file_part, {"type": "text", "text": EXTRACTION_INSTRUCTION}]
        )
    except Exception as e:
        _LOG.error("Error extracting text from %s: %s", document.name, e)
        raise ExtractionError(document.name, original_error=e) from e


def generate_summaries(
    combined_text: str,
    mode: SummaryMode,
    client,
    prompt_builder: Optional[PromptBuilder] = None,
) -> str:
    """Generate the three-part summary for *combined_text*.

    Returns the model output, a prompt-for-input message when the text is
    blank, or a fixed error message when the remote call fails.
    """
    if not combined_text.strip():
        return EMPTY_DOCUMENT_MESSAGE

    builder = prompt_builder or PromptBuilder()
    prompt = builder.build(combined_text, mode)
    _LOG.info(
        "Generating %s summaries (%d chars of source text)",
        SummaryMode(mode).value,
        len(combined_text),
    )
    try:
        return client.generate_content(prompt)
    except Exception:
        _LOG.exception("Error generating summaries")
        return SUMMARY_FAILURE_MESSAGE


class SummaryGenerator:
    """Summarization client bound to one remote capability."""

    def __init__(self, client, prompt_builder: Optional[PromptBuilder] = None):
        self.client = client
        self.prompt_builder = prompt_builder or PromptBuilder()

    def extract_text(self, document: SourceDocument) -> str:
        """Extract text from *document* using the bound client."""
        return extract_text(document, self.client)

    def generate_summaries(self, combined_text: str, mode: SummaryMode) -> str:
        """Generate summaries using the bound client and prompt builder."""
        return generate_summaries(
            combined_text, mode, self.client, prompt_builder=self.prompt_builder
        )
