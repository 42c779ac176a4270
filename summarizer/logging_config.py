"""
Logging setup for the summarizer web server.

Request threads only put records on a queue; one listener thread writes
them to stdout. The HTTP and model-SDK libraries used to reach the remote
model are turned down unless debug logging is on.
"""

import logging
import logging.handlers
import sys
from queue import Queue
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

# Level applied to third-party loggers outside debug mode; None disables the logger
LIBRARY_LEVELS: Dict[str, Optional[int]] = {
    "httpx": None,
    "httpcore": None,
    "urllib3": logging.WARNING,
    "grpc": logging.WARNING,
    "openai": logging.WARNING,
    "google_genai": logging.WARNING,
    "google.auth": logging.WARNING,
    "langchain_core": logging.WARNING,
    "langchain_google_genai": logging.WARNING,
    "langchain_openai": logging.WARNING,
    "langchain_deepseek": logging.WARNING,
    "langchain_ollama": logging.WARNING,
    "werkzeug": logging.WARNING,
}

_HTTP_LINE_PREFIXES = ("HTTP Request:", "HTTP Response:")


class HttpChatterFilter(logging.Filter):
    """Drops the per-request lines model SDKs log for each remote call."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if (record.name or "").startswith(("httpx", "httpcore")):
            return False
        message = record.getMessage()
        return not (isinstance(message, str) and message.startswith(_HTTP_LINE_PREFIXES))


class QueueLoggingConfig:
    """Owns the queue listener that serializes log output."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self._listener: Optional[logging.handlers.QueueListener] = None
        self._queue: Optional[Queue] = None

    @property
    def is_running(self) -> bool:
        return self._listener is not None

    def setup_logging(self, debug: bool = False) -> None:
        """
        Install the queue handler on the root logger and start the listener.

        Calling it again restarts the listener with the new level.

        Args:
            debug: Log at DEBUG and keep third-party loggers at their own levels
        """
        if self.is_running:
            self.stop()

        output = logging.StreamHandler(self.stream)
        output.setFormatter(logging.Formatter(LOG_FORMAT))

        self._queue = Queue()
        self._listener = logging.handlers.QueueListener(
            self._queue, output, respect_handler_level=True
        )
        self._listener.start()

        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(logging.handlers.QueueHandler(self._queue))
        root.setLevel(logging.DEBUG if debug else logging.INFO)

        if not debug:
            self._quiet_libraries(root)

    def _quiet_libraries(self, root: logging.Logger) -> None:
        for handler in root.handlers:
            handler.addFilter(HttpChatterFilter())

        for name, level in LIBRARY_LEVELS.items():
            library_logger = logging.getLogger(name)
            if level is None:
                library_logger.disabled = True
            else:
                library_logger.setLevel(level)

    def stop(self) -> None:
        """Flush pending records and stop the listener."""
        if self._listener:
            self._listener.stop()
        self._listener = None
        self._queue = None


logging_config = QueueLoggingConfig()


def setup_logging(debug: bool = False) -> None:
    logging_config.setup_logging(debug)


def stop_logging() -> None:
    logging_config.stop()


def get_logger(name: str) -> logging.Logger:
    """Return the named logger; records flow through the shared queue."""
    return logging.getLogger(name)
