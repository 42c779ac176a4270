"""
Configuration management for the Legal & Financial Document Summarizer.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

from summarizer.chat_session import DEFAULT_GREETING, DEFAULT_SYSTEM_INSTRUCTION


@dataclass
class LLMConfig:
    """LLM configuration settings."""
    provider: str
    api_key: str
    base_url: str
    model: str
    temperature: float
    timeout: int
    max_retries: int


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool
    session_max_age_hours: int


@dataclass
class UploadConfig:
    """Upload limit settings."""
    max_files: int
    max_file_size_mb: int


@dataclass
class ChatConfig:
    """Follow-up chat settings."""
    system_instruction: str
    greeting: str
    resend_history: bool
    # False: a failed send blocks further sends until retry succeeds.
    # True: sending stays open after a failure; the error reply stays visible.
    allow_send_after_error: bool


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "summarizer_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "llm": {
                "provider": "gemini",
                "api_key": "",
                "base_url": "",
                "model": "gemini-2.5-flash",
                "temperature": 0.2,
                "timeout": 120,
                "max_retries": 0
            },
            "app": {
                "host": "0.0.0.0",
                "port": 8080,
                "debug": False,
                "session_max_age_hours": 24
            },
            "upload": {
                "max_files": 10,
                "max_file_size_mb": 20
            },
            "chat": {
                "system_instruction": DEFAULT_SYSTEM_INSTRUCTION,
                "greeting": DEFAULT_GREETING,
                "resend_history": True,
                "allow_send_after_error": False
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        llm = self._config["llm"]

        if os.getenv("LLM_PROVIDER"):
            llm["provider"] = os.getenv("LLM_PROVIDER").lower()

        # Key lookup follows the selected provider
        provider = llm["provider"]
        if provider == "gemini":
            key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY")
        elif provider == "openai":
            key = os.getenv("OPENAI_API_KEY")
        elif provider == "deepseek":
            key = os.getenv("DEEPSEEK_API_KEY")
        else:
            key = None
        if key:
            llm["api_key"] = key

        if os.getenv("LLM_BASE_URL"):
            llm["base_url"] = os.getenv("LLM_BASE_URL")

        if os.getenv("LLM_MODEL"):
            llm["model"] = os.getenv("LLM_MODEL")

        if os.getenv("LLM_TEMPERATURE"):
            llm["temperature"] = float(os.getenv("LLM_TEMPERATURE"))

        if os.getenv("LLM_TIMEOUT"):
            llm["timeout"] = int(os.getenv("LLM_TIMEOUT"))

        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = _env_flag(os.getenv("APP_DEBUG"))

        # Upload limits
        if os.getenv("MAX_UPLOAD_FILES"):
            self._config["upload"]["max_files"] = int(os.getenv("MAX_UPLOAD_FILES"))

        if os.getenv("MAX_FILE_SIZE_MB"):
            self._config["upload"]["max_file_size_mb"] = int(os.getenv("MAX_FILE_SIZE_MB"))

        # Chat settings
        if os.getenv("CHAT_RESEND_HISTORY"):
            self._config["chat"]["resend_history"] = _env_flag(os.getenv("CHAT_RESEND_HISTORY"))

        if os.getenv("CHAT_ALLOW_SEND_AFTER_ERROR"):
            self._config["chat"]["allow_send_after_error"] = _env_flag(
                os.getenv("CHAT_ALLOW_SEND_AFTER_ERROR")
            )

    def get_llm_config(self) -> LLMConfig:
        """Get LLM configuration."""
        llm_config = self._config["llm"]
        return LLMConfig(
            provider=llm_config["provider"],
            api_key=llm_config["api_key"],
            base_url=llm_config["base_url"],
            model=llm_config["model"],
            temperature=llm_config["temperature"],
            timeout=llm_config["timeout"],
            max_retries=llm_config["max_retries"]
        )

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"],
            session_max_age_hours=app_config["session_max_age_hours"]
        )

    def get_upload_config(self) -> UploadConfig:
        """Get upload limit configuration."""
        upload_config = self._config["upload"]
        return UploadConfig(
            max_files=upload_config["max_files"],
            max_file_size_mb=upload_config["max_file_size_mb"]
        )

    def get_chat_config(self) -> ChatConfig:
        """Get chat configuration."""
        chat_config = self._config["chat"]
        return ChatConfig(
            system_instruction=chat_config["system_instruction"],
            greeting=chat_config["greeting"],
            resend_history=chat_config["resend_history"],
            allow_send_after_error=chat_config["allow_send_after_error"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)

