"""
Factory for creating export module.
"""
from .routes import create_export_routes


def create_export_module() -> dict:
    """Create export module.

    Returns:
        Dictionary containing the blueprint
    """
    return {
        "blueprint": create_export_routes()
    }
