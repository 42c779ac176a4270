"""
Basic import tests to verify the core functionality.
"""

import pytest


def test_summarizer_imports():
    """Test that the summarizer package exposes its public interface."""
    from summarizer import (
        SummaryService,
        IngestionAdapter,
        PromptBuilder,
        SummaryGenerator,
        ChatSession,
        export_as_text,
        export_as_document,
    )

    assert callable(export_as_text)
    assert callable(export_as_document)
    for cls in (SummaryService, IngestionAdapter, PromptBuilder, SummaryGenerator, ChatSession):
        assert isinstance(cls, type)


def test_models_can_be_instantiated():
    """Test that data models can be created."""
    from summarizer.models import SourceDocument, ChatMessage, ChatRole, ExportedFile

    doc = SourceDocument(name="a.txt", media_type="text/plain", data=b"abc")
    assert doc.size == 3
    assert doc.is_plain_text
    assert not doc.needs_extraction

    message = ChatMessage(role=ChatRole.USER, text="hi")
    assert message.error is False
    assert message.to_dict()["role"] == "user"

    exported = ExportedFile(filename="summary.txt", mimetype="text/plain", content=b"x")
    assert exported.size == 1


def test_app_modules_import():
    """Test that the web modules can be imported."""
    from app.main import create_app
    from app.summarize import create_summarize_module
    from app.chat import create_chat_module
    from app.export import create_export_module

    assert callable(create_app)
    assert callable(create_summarize_module)
    assert callable(create_chat_module)
    assert callable(create_export_module)


def test_logging_setup_and_stop():
    """Test that queue logging can be started and stopped."""
    import logging
    from summarizer.logging_config import QueueLoggingConfig

    config = QueueLoggingConfig()
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        config.setup_logging(debug=False)
        assert config.is_running
        assert logging.getLogger("openai").level == logging.WARNING
        assert logging.getLogger("httpx").disabled
    finally:
        config.stop()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("httpx").disabled = False

    assert not config.is_running
