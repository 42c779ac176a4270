"""
Summarize services: request handling around the summary pipeline.
"""
import logging
from typing import List, Optional

import markdown

from summarizer import SummaryService, SummaryMode, SourceDocument
from summarizer.exceptions import IngestionError, ExtractionError
from .models import SummarizeOutcome
from .workspace import WorkspaceTracker

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during processing."


class SummaryRenderer:
    """Service for rendering summary text for display."""

    def render_markdown(self, md_text: str) -> str:
        """Convert the model's Markdown to HTML."""
        return markdown.markdown(md_text, extensions=["sane_lists", "nl2br"])


class SummarizeService:
    """Runs summarization requests for browser workspaces."""

    def __init__(self, summary_service: SummaryService, workspace_tracker: WorkspaceTracker,
                 renderer: Optional[SummaryRenderer] = None, max_age_hours: int = 24):
        self.summary_service = summary_service
        self.workspace_tracker = workspace_tracker
        self.renderer = renderer or SummaryRenderer()
        self.max_age_hours = max_age_hours

    def summarize(self, workspace_id: str, documents: List[SourceDocument],
                  pasted_text: str = "", mode: Optional[str] = None) -> SummarizeOutcome:
        """Summarize the uploaded documents and pasted text for a workspace."""
        self.workspace_tracker.cleanup_old_workspaces(self.max_age_hours)

        token = self.workspace_tracker.begin(workspace_id)
        if token is None:
            return SummarizeOutcome.busy()

        logger.info(
            f"Summarization started for workspace {workspace_id}: "
            f"{len(documents)} file(s), {len(pasted_text or '')} pasted chars, mode={mode}"
        )
        try:
            summary_mode = SummaryMode.parse(mode)
            summary = self.summary_service.summarize(documents, pasted_text or "", summary_mode)
            outcome = SummarizeOutcome.completed(summary, self.renderer.render_markdown(summary))
        except IngestionError as e:
            logger.warning(f"Rejected summarization input for workspace {workspace_id}: {e.message}")
            outcome = SummarizeOutcome.failed(e.message, 400)
        except ExtractionError as e:
            logger.warning(f"Extraction failed for workspace {workspace_id}: {e.message}")
            outcome = SummarizeOutcome.failed(e.message, 422)
        except Exception:
            logger.exception(f"Unexpected summarization failure for workspace {workspace_id}")
            outcome = SummarizeOutcome.failed(UNKNOWN_ERROR_MESSAGE, 500)

        stored = self.workspace_tracker.complete(
            workspace_id, token, result=outcome.summary, error=outcome.error
        )
        if not stored:
            return SummarizeOutcome.stale()
        return outcome

    def reset(self, workspace_id: str) -> None:
        """Start over for a workspace."""
        self.workspace_tracker.reset(workspace_id)

    def get_state(self, workspace_id: str) -> dict:
        """Get the visible state of a workspace."""
        return self.workspace_tracker.get_state(workspace_id)
