"""
Summarize module: upload/paste handling with one request in flight per browser.
"""

from .models import SummarizeOutcome
from .workspace import WorkspaceTracker, SummarizeWorkspace
from .services import SummarizeService, SummaryRenderer
from .factory import create_summarize_module

__all__ = [
    "SummarizeOutcome",
    "WorkspaceTracker",
    "SummarizeWorkspace",
    "SummarizeService",
    "SummaryRenderer",
    "create_summarize_module",
]
