import logging
import sys


class _ContextFormatter(logging.Formatter):
    """Appends keyword context passed to Log.* as `key=value` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
            line = f"{line} | {pairs}"
        return line


class Log:
    """Centralized logging with structured format.

    Keyword arguments are kept under a single ``context`` record attribute so
    names such as ``filename`` never clash with built-in LogRecord fields.
    """

    _logger: logging.Logger = logging.getLogger("resume_screener")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra={"context": context})

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra={"context": context})

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra={"context": context})

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra={"context": context})
