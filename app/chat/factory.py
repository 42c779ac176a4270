"""
Factory for creating chat module.
"""
from .services import ChatService
from .routes import create_chat_routes


def create_chat_module(client, chat_config=None, max_age_hours: int = 24) -> dict:
    """Create chat module with service and routes.

    Args:
        client: Remote generative capability (LLMProvider or a test double)
        chat_config: Optional ChatConfig
        max_age_hours: Idle sessions older than this are closed

    Returns:
        Dictionary containing the service and blueprint
    """
    chat_service = ChatService(client, chat_config=chat_config, max_age_hours=max_age_hours)
    blueprint = create_chat_routes(chat_service)

    return {
        "service": chat_service,
        "blueprint": blueprint
    }
