"""
service.py - Unified summary service interface
"""

import logging
from typing import Iterable, Optional

from .exceptions import EmptyInputError
from .file_ingestion import IngestionAdapter
from .models import SourceDocument, SummaryMode
from .prompt_builder import PromptBuilder
from .summary_generator import SummaryGenerator

_LOG = logging.getLogger("summary_service")


class SummaryService:
    """Complete pipeline: ingestion, combination, prompt and summary."""

    def __init__(
        self,
        client,
        max_files: Optional[int] = None,
        max_file_size_mb: Optional[int] = None,
        prompt_builder: Optional[PromptBuilder] = None,
    ):
        self.client = client
        self.ingestion = IngestionAdapter(
            client, max_files=max_files, max_file_size_mb=max_file_size_mb
        )
        self.generator = SummaryGenerator(client, prompt_builder=prompt_builder)

    def summarize(
        self,
        documents: Iterable[SourceDocument] = (),
        pasted_text: str = "",
        mode: SummaryMode = SummaryMode.LEGAL,
    ) -> str:
        """Summarize uploaded documents and pasted text.

        Raises:
            IngestionError: If the input is rejected before any summary call
            ExtractionError: If a PDF or image cannot be read
        """
        combined = self.ingestion.combine(documents, pasted_text)
        if not combined.strip():
            raise EmptyInputError()
        return self.generator.generate_summaries(combined, mode)
