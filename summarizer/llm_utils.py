"""
llm_utils.py - LLM utilities and provider management

This module provides LLM invocation functionality with support for
Gemini, DeepSeek, Ollama, and OpenAI-compatible providers. On top of
plain invocation it offers the two calls the summarizer needs from the
remote model: one-shot content generation (text or file parts) and a
conversational chat context.
"""

import logging
import os
import re
import threading
from typing import Any, Dict, List, Optional, Union

from langchain_deepseek.chat_models import DEFAULT_API_BASE as DEEPSEEK_DEFAULT_API_BASE
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_deepseek import ChatDeepSeek
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_ollama import OllamaLLM
from langchain_openai import ChatOpenAI

_LOG = logging.getLogger("llm_utils")

# Default configuration
DEFAULT_LLM_PROVIDER = "gemini"  # "gemini", "deepseek", "ollama", or "openai"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "qwen3:8b"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEEPSEEK_MODEL_NAME = "deepseek-chat"

# Providers whose chat models accept image and PDF content blocks
MULTIMODAL_PROVIDERS = ("gemini", "openai")

Contents = Union[str, List[Union[str, Dict[str, Any]]]]


def message_text(message: Union[BaseMessage, str]) -> str:
    """Return the plain text of a model reply.

    Chat models may answer with a string or with a list of content parts.
    """
    content = message.content if isinstance(message, BaseMessage) else message
    if isinstance(content, str):
        return content
    parts: List[str] = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def clean_ollama_response(content: str) -> str:
    """Clean Ollama response by removing <think> tags."""
    return re.sub(r"<think>.*?</think>", "", content, flags=re.DOTALL)


class LLMProvider:
    """LLM provider configuration and management."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        provider: str = DEFAULT_LLM_PROVIDER,
        model: str = None,
        temperature: Optional[float] = None,
        timeout: int = 120,
        max_retries: int = 0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.provider = provider.lower()
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.max_retries = max_retries
        self._llm = None

        # Set defaults based on provider
        self._configure_provider()

    def _configure_provider(self):
        """Configure provider-specific settings."""
        if self.provider == "ollama":
            if not self.base_url:
                self.base_url = os.getenv("OLLAMA_BASE_URL", DEFAULT_OLLAMA_BASE_URL)
            if not self.model:
                self.model = os.getenv("OLLAMA_MODEL", DEFAULT_OLLAMA_MODEL)
        elif self.provider == "openai":
            if not self.api_key:
                self.api_key = os.getenv("OPENAI_API_KEY")
            if not self.base_url:
                self.base_url = os.getenv(
                    "OPENAI_API_BASE", "https://api.openai.com/v1"
                )
            if not self.model:
                self.model = os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)
        elif self.provider == "deepseek":
            if not self.api_key:
                self.api_key = os.getenv("DEEPSEEK_API_KEY")
            if not self.model:
                self.model = DEEPSEEK_MODEL_NAME
        elif self.provider == "gemini":
            if not self.api_key:
                self.api_key = (
                    os.getenv("GEMINI_API_KEY")
                    or os.getenv("GOOGLE_API_KEY")
                    or os.getenv("API_KEY")
                )
            if not self.model:
                self.model = DEFAULT_GEMINI_MODEL
        else:
            raise ValueError(f"Unsupported LLM provider: {self.provider}")

    @property
    def supports_files(self) -> bool:
        return self.provider in MULTIMODAL_PROVIDERS

    def get_llm(self):
        """Get the configured LLM instance (built once per provider object)."""
        if self._llm is None:
            self._llm = self._build_llm()
        return self._llm

    def _build_llm(self):
        extra: Dict[str, Any] = {}
        if self.temperature is not None:
            extra["temperature"] = self.temperature

        if self.provider == "ollama":
            _LOG.debug("Using Ollama provider: %s at %s", self.model, self.base_url)
            return OllamaLLM(
                model=self.model,
                base_url=self.base_url,
                timeout=self.timeout,
                **extra,
            )
        elif self.provider == "openai":
            if not self.api_key:
                raise ValueError(
                    "OpenAI API key required. Set OPENAI_API_KEY environment variable or pass api_key"
                )
            _LOG.debug(
                "Using OpenAI-compatible provider: %s at %s", self.model, self.base_url
            )
            return ChatOpenAI(
                model=self.model,
                api_key=self.api_key,
                base_url=self.base_url,
                max_tokens=None,
                timeout=self.timeout,
                max_retries=self.max_retries,
                **extra,
            )
        elif self.provider == "deepseek":
            if not self.api_key:
                raise ValueError(
                    "DeepSeek API key required. Set DEEPSEEK_API_KEY environment variable or pass api_key"
                )
            _LOG.debug("Using DeepSeek provider: %s", self.model)
            return ChatDeepSeek(
                model=self.model,
                max_tokens=None,
                timeout=self.timeout,
                max_retries=self.max_retries,
                api_key=self.api_key,
                api_base=self.base_url if self.base_url else DEEPSEEK_DEFAULT_API_BASE,
                **extra,
            )
        else:  # gemini
            if not self.api_key:
                raise ValueError(
                    "Gemini API key required. Set GEMINI_API_KEY environment variable or pass api_key"
                )
            _LOG.debug("Using Gemini provider: %s", self.model)
            return ChatGoogleGenerativeAI(
                model=self.model,
                google_api_key=self.api_key,
                timeout=self.timeout,
                max_retries=self.max_retries,
                **extra,
            )

    def invoke(self, messages: List[BaseMessage], **kwargs) -> AIMessage:
        """Invoke LLM with the configured provider."""
        llm = self.get_llm()

        if self.provider == "ollama":
            # OllamaLLM is a completion model, so the conversation is flattened
            if len(messages) == 1:
                prompt = message_text(messages[0])
            else:
                prompt = "\n\n".join(
                    [f"{_transcript_role(m)}: {message_text(m)}" for m in messages]
                )

            response = llm.invoke(prompt)

            # Ollama may include <think> tags mixed with output
            cleaned_content = response
            if isinstance(cleaned_content, str):
                cleaned_content = clean_ollama_response(cleaned_content)

            return AIMessage(content=cleaned_content)
        else:
            return llm.invoke(messages)

    def generate_content(self, contents: Contents) -> str:
        """Issue one generation request and return the reply text.

        Args:
            contents: A prompt string or a list of content parts

        Returns:
            Text of the model reply
        """
        resp = self.invoke([HumanMessage(content=contents)])
        return message_text(resp)

    def build_file_part(
        self, media_type: str, data_b64: str, filename: Optional[str] = None
    ) -> Dict[str, Any]:
        """Build a base64 content block for an image or PDF.

        Raises:
            ValueError: If the provider cannot read files
        """
        if not self.supports_files:
            raise ValueError(
                f"Provider '{self.provider}' does not accept file content; "
                f"use one of: {', '.join(MULTIMODAL_PROVIDERS)}"
            )
        if media_type.startswith("image/"):
            return {
                "type": "image",
                "source_type": "base64",
                "mime_type": media_type,
                "data": data_b64,
            }
        part = {
            "type": "file",
            "source_type": "base64",
            "mime_type": media_type,
            "data": data_b64,
        }
        if filename:
            part["filename"] = filename
        return part

    def create_chat(
        self, system_instruction: Optional[str] = None, resend_history: bool = True
    ) -> "RemoteChat":
        """Open a conversational context against this provider."""
        return RemoteChat(
            self, system_instruction=system_instruction, resend_history=resend_history
        )


def _transcript_role(message: BaseMessage) -> str:
    if isinstance(message, SystemMessage):
        return "System"
    if isinstance(message, HumanMessage):
        return "User"
    return "Assistant"


class RemoteChat:
    """Conversation against a stateless chat model.

    The models behind ``LLMProvider`` keep no state between calls, so the
    context keeps the exchanged messages itself and resends them on every
    call when ``resend_history`` is set. Only exchanges that completed are
    recorded; a failed ``send`` leaves the history untouched.
    """

    def __init__(
        self,
        provider: LLMProvider,
        system_instruction: Optional[str] = None,
        resend_history: bool = True,
    ):
        self._provider = provider
        self.system_instruction = system_instruction
        self.resend_history = resend_history
        self._history: List[BaseMessage] = []
        self._lock = threading.Lock()

    @property
    def history(self) -> List[BaseMessage]:
        with self._lock:
            return list(self._history)

    def send(self, text: str) -> str:
        """Send one user turn and return the model reply text."""
        messages: List[BaseMessage] = []
        if self.system_instruction:
            messages.append(SystemMessage(content=self.system_instruction))
        if self.resend_history:
            messages.extend(self.history)
        messages.append(HumanMessage(content=text))

        resp = self._provider.invoke(messages)
        reply = message_text(resp)

        with self._lock:
            self._history.append(HumanMessage(content=text))
            self._history.append(AIMessage(content=reply))
        return reply


def create_llm_provider(llm_config) -> LLMProvider:
    """Create a provider from an ``LLMConfig``."""
    return LLMProvider(
        api_key=llm_config.api_key or None,
        base_url=llm_config.base_url or None,
        provider=llm_config.provider,
        model=llm_config.model or None,
        temperature=llm_config.temperature,
        timeout=llm_config.timeout,
        max_retries=llm_config.max_retries,
    )

