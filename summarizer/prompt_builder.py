"""
prompt_builder.py - Summary prompt assembly

The prompt body lives in prompts/summary.md. Only the focus block depends
on the summary mode; the section structure and the embedded document text
are the same for every mode.
"""

from pathlib import Path
from typing import Dict, Optional

from langchain_core.prompts import PromptTemplate

from .models import SummaryMode

PROMPTS_DIR = Path(__file__).parent / "prompts"
SUMMARY_PROMPT_FILE = "summary.md"

FOCUS_GUIDANCE: Dict[SummaryMode, str] = {
    SummaryMode.LEGAL: (
        "- Mode: [LEGAL]\n"
        "  → Focus on legal case background, involved parties, legal issues, key rulings, court reasoning, and outcomes.\n"
        "  → Maintain formal tone with legal accuracy and clarity.\n"
        "  → Avoid opinions; stick to judicial logic."
    ),
    SummaryMode.FINANCIAL: (
        "- Mode: [FINANCIAL]\n"
        "  → Focus on financial performance, metrics, trends, decisions, obligations, and implications.\n"
        "  → Maintain a professional analytical tone suitable for business summaries."
    ),
    SummaryMode.DUAL: (
        "- Mode: [DUAL]\n"
        "  → Combine both legal and financial relevance — highlight connections between legal rulings and financial implications.\n"
        "  → Keep legal accuracy for rulings and analytical precision for figures."
    ),
}


def load_summary_template(prompts_dir: Optional[Path] = None) -> PromptTemplate:
    """Load the summary prompt template from disk."""
    path = (prompts_dir or PROMPTS_DIR) / SUMMARY_PROMPT_FILE
    return PromptTemplate.from_file(path, encoding="utf-8")


def build_summary_prompt(
    combined_text: str,
    mode: SummaryMode,
    template: Optional[PromptTemplate] = None,
) -> str:
    """Assemble the summarization prompt.

    The combined text is inserted verbatim: no escaping, truncation or
    redaction takes place.
    """
    tmpl = template or load_summary_template()
    return tmpl.format(
        focus_block=FOCUS_GUIDANCE[SummaryMode(mode)],
        document_text=combined_text,
    )


class PromptBuilder:
    """Builds summary prompts from a template loaded once."""

    def __init__(self, prompts_dir: Optional[Path] = None):
        self.prompts_dir = prompts_dir or PROMPTS_DIR
        self._template: Optional[PromptTemplate] = None

    @property
    def template(self) -> PromptTemplate:
        if self._template is None:
            self._template = load_summary_template(self.prompts_dir)
        return self._template

    def build(self, combined_text: str, mode: SummaryMode) -> str:
        return build_summary_prompt(combined_text, mode, template=self.template)

    def focus_block(self, mode: SummaryMode) -> str:
        return FOCUS_GUIDANCE[SummaryMode(mode)]
