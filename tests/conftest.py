"""
Shared fixtures: in-memory doubles for the remote generative model.
"""
import pytest

from config_manager import ConfigManager


class FakeChat:
    """Remote chat context returning scripted replies.

    A scripted Exception instance is raised instead of returned.
    """

    def __init__(self, replies, system_instruction=None, resend_history=True):
        self.replies = replies
        self.system_instruction = system_instruction
        self.resend_history = resend_history
        self.sent = []

    def send(self, text):
        self.sent.append(text)
        reply = self.replies.pop(0) if self.replies else f"echo: {text}"
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeClient:
    """Stands in for LLMProvider; records every remote call."""

    def __init__(self, summary="**Extractive Summary:**\nA.", extracted="extracted text",
                 fail_extract=False, fail_generate=False, chat_replies=None):
        self.summary = summary
        self.extracted = extracted
        self.fail_extract = fail_extract
        self.fail_generate = fail_generate
        self.chat_replies = list(chat_replies or [])
        self.prompts = []
        self.extractions = []
        self.chats = []

    @property
    def call_count(self):
        return len(self.prompts) + len(self.extractions)

    def build_file_part(self, media_type, data_b64, filename=None):
        return {
            "type": "file",
            "source_type": "base64",
            "mime_type": media_type,
            "data": data_b64,
            "filename": filename,
        }

    def generate_content(self, contents):
        if isinstance(contents, list):
            self.extractions.append(contents)
            if self.fail_extract:
                raise RuntimeError("model could not read file")
            return self.extracted
        self.prompts.append(contents)
        if self.fail_generate:
            raise RuntimeError("network unreachable")
        return self.summary

    def create_chat(self, system_instruction, resend_history=True):
        chat = FakeChat(self.chat_replies, system_instruction, resend_history)
        self.chats.append(chat)
        return chat


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def make_client():
    """Build a FakeClient with custom behaviour."""
    return FakeClient


@pytest.fixture
def config_manager(tmp_path, monkeypatch):
    """ConfigManager isolated from the environment and the working directory."""
    for name in (
        "LLM_PROVIDER", "GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY", "OPENAI_API_KEY",
        "DEEPSEEK_API_KEY", "LLM_BASE_URL", "LLM_MODEL", "LLM_TEMPERATURE", "LLM_TIMEOUT",
        "APP_HOST", "APP_PORT", "APP_DEBUG", "MAX_UPLOAD_FILES", "MAX_FILE_SIZE_MB",
        "CHAT_RESEND_HISTORY", "CHAT_ALLOW_SEND_AFTER_ERROR",
    ):
        monkeypatch.delenv(name, raising=False)
    return ConfigManager(str(tmp_path / "summarizer_config.json"))
