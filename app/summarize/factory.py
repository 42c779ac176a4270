"""
Factory for creating summarize module.
"""
from summarizer import SummaryService
from .services import SummarizeService, SummaryRenderer
from .routes import create_summarize_routes
from .workspace import WorkspaceTracker


def create_summarize_module(client, upload_config=None, max_age_hours: int = 24) -> dict:
    """Create summarize module with services and routes.

    Args:
        client: Remote generative capability (LLMProvider or a test double)
        upload_config: Optional UploadConfig with batch limits
        max_age_hours: Idle workspaces older than this are pruned

    Returns:
        Dictionary containing the services and blueprint
    """
    summary_service = SummaryService(
        client,
        max_files=upload_config.max_files if upload_config else None,
        max_file_size_mb=upload_config.max_file_size_mb if upload_config else None,
    )
    workspace_tracker = WorkspaceTracker()
    summarize_service = SummarizeService(
        summary_service,
        workspace_tracker,
        renderer=SummaryRenderer(),
        max_age_hours=max_age_hours,
    )

    blueprint = create_summarize_routes(summarize_service)

    return {
        "service": summarize_service,
        "summary_service": summary_service,
        "workspace_tracker": workspace_tracker,
        "blueprint": blueprint
    }
