# Summarizer package for legal and financial document summaries

from .exceptions import (
    SummarizerError,
    IngestionError,
    UnsupportedFileTypeError,
    UploadLimitError,
    EmptyInputError,
    InvalidModeError,
    ExtractionError,
)
from .models import (
    SummaryMode,
    SourceDocument,
    ChatRole,
    ChatState,
    ChatMessage,
    ExportedFile,
)
from .llm_utils import (
    LLMProvider,
    RemoteChat,
    create_llm_provider,
    message_text,
    clean_ollama_response,
)
from .prompt_builder import PromptBuilder, build_summary_prompt, FOCUS_GUIDANCE
from .summary_generator import SummaryGenerator, extract_text, generate_summaries
from .file_ingestion import (
    IngestionAdapter,
    ingest_documents,
    combine_text,
    wrap_block,
)
from .service import SummaryService
from .chat_session import ChatSession
from .export import export_as_text, export_as_document
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    QueueLoggingConfig,
)

__all__ = [
    "SummarizerError",
    "IngestionError",
    "UnsupportedFileTypeError",
    "UploadLimitError",
    "EmptyInputError",
    "InvalidModeError",
    "ExtractionError",
    "SummaryMode",
    "SourceDocument",
    "ChatRole",
    "ChatState",
    "ChatMessage",
    "ExportedFile",
    "LLMProvider",
    "RemoteChat",
    "create_llm_provider",
    "message_text",
    "clean_ollama_response",
    "PromptBuilder",
    "build_summary_prompt",
    "FOCUS_GUIDANCE",
    "SummaryGenerator",
    "extract_text",
    "generate_summaries",
    "IngestionAdapter",
    "ingest_documents",
    "combine_text",
    "wrap_block",
    "SummaryService",
    "ChatSession",
    "export_as_text",
    "export_as_document",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "QueueLoggingConfig",
]
