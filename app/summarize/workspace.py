"""
Workspace tracker for summarization requests.
Keeps one workspace per browser and allows one request in flight per workspace.
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class SummarizeWorkspace:
    """Server-side summarization state for one browser."""
    workspace_id: str
    loading: bool = False
    result: str = ""
    error: Optional[str] = None
    generation: int = 0
    updated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'loading': self.loading,
            'result': self.result,
            'error': self.error,
            'updated_at': self.updated_at.isoformat()
        }


class WorkspaceTracker:
    """Thread-safe registry of summarization workspaces.

    ``begin`` hands out the workspace's generation number as a token.
    ``reset`` bumps the generation, so a reply that arrives after a reset
    carries a stale token and ``complete`` refuses to store it.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._workspaces: Dict[str, SummarizeWorkspace] = {}

    def _get_or_create(self, workspace_id: str) -> SummarizeWorkspace:
        workspace = self._workspaces.get(workspace_id)
        if workspace is None:
            workspace = SummarizeWorkspace(workspace_id=workspace_id)
            self._workspaces[workspace_id] = workspace
        return workspace

    def is_loading(self, workspace_id: str) -> bool:
        """Check if a request is in flight for a workspace."""
        with self._lock:
            workspace = self._workspaces.get(workspace_id)
            return workspace is not None and workspace.loading

    def begin(self, workspace_id: str) -> Optional[int]:
        """Mark a request as in flight.

        Returns:
            The generation token, or None if a request is already in flight
        """
        with self._lock:
            workspace = self._get_or_create(workspace_id)
            if workspace.loading:
                logger.info(f"Summarization already in flight for workspace {workspace_id}")
                return None
            workspace.loading = True
            workspace.result = ""
            workspace.error = None
            workspace.updated_at = datetime.now()
            return workspace.generation

    def complete(self, workspace_id: str, token: int, result: str = "",
                 error: Optional[str] = None) -> bool:
        """Store the outcome of a request.

        Returns:
            False if the workspace was reset or dropped since ``begin``
        """
        with self._lock:
            workspace = self._workspaces.get(workspace_id)
            if workspace is None or workspace.generation != token:
                logger.info(f"Discarding stale summarization result for workspace {workspace_id}")
                return False
            workspace.loading = False
            workspace.result = result or ""
            workspace.error = error
            workspace.updated_at = datetime.now()
            return True

    def reset(self, workspace_id: str) -> None:
        """Start over: clear the workspace and invalidate in-flight requests."""
        with self._lock:
            workspace = self._get_or_create(workspace_id)
            workspace.generation += 1
            workspace.loading = False
            workspace.result = ""
            workspace.error = None
            workspace.updated_at = datetime.now()
            logger.info(f"Reset workspace {workspace_id}")

    def get_state(self, workspace_id: str) -> dict:
        """Get the visible state of a workspace."""
        with self._lock:
            return self._get_or_create(workspace_id).to_dict()

    def cleanup_old_workspaces(self, max_age_hours: int = 24) -> int:
        """Remove idle workspaces to prevent memory bloat."""
        cutoff = datetime.now().timestamp() - (max_age_hours * 3600)

        with self._lock:
            to_remove = [
                key for key, ws in self._workspaces.items()
                if not ws.loading and ws.updated_at.timestamp() < cutoff
            ]
            for key in to_remove:
                del self._workspaces[key]

        if to_remove:
            logger.info(f"Cleaned up {len(to_remove)} idle workspaces")
        return len(to_remove)
