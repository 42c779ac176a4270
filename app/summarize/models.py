"""
Summarize request models.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class SummarizeOutcome:
    """Result of one summarization request."""
    success: bool
    summary: str = ""
    summary_html: str = ""
    error: Optional[str] = None
    already_processing: bool = False
    discarded: bool = False
    status_code: int = 200

    @classmethod
    def completed(cls, summary: str, summary_html: str) -> "SummarizeOutcome":
        return cls(success=True, summary=summary, summary_html=summary_html)

    @classmethod
    def failed(cls, error: str, status_code: int) -> "SummarizeOutcome":
        return cls(success=False, error=error, status_code=status_code)

    @classmethod
    def busy(cls) -> "SummarizeOutcome":
        return cls(success=False, already_processing=True)

    @classmethod
    def stale(cls) -> "SummarizeOutcome":
        return cls(success=False, discarded=True)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "summary": self.summary,
            "summary_html": self.summary_html,
            "error": self.error,
            "already_processing": self.already_processing,
            "discarded": self.discarded,
        }
