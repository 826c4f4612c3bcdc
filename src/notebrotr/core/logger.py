"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so that render stages can
attach context (public keys, event ids, durations) as keyword arguments.
Two output formats are supported: human-readable key=value pairs (default)
and machine-parseable JSON for log aggregators.

Values containing spaces, equals signs, or quotes are escaped and wrapped
in double quotes. Long values (e.g. whole note bodies) are truncated to a
configurable maximum length.

Examples:
    ```python
    from notebrotr.core.logger import Logger, setup_logging

    setup_logging(level="DEBUG")
    logger = Logger("notebrotr.render")
    logger.info("render_completed", kind=1, duration_s=0.012)
    # Output: info notebrotr.render render_completed kind=1 duration_s=0.012
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar


_TRUNCATION_SUFFIX = "...<truncated {} chars>"


def _truncate(value: str, max_length: int | None) -> str:
    if max_length and len(value) > max_length:
        return value[:max_length] + _TRUNCATION_SUFFIX.format(len(value) - max_length)
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' pubkey=ab12 error="timed out"'.
        Returns empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or any(c in s for c in " =\"'\n"):
            escaped = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level logger message key=value ...``.

    Reads structured data from the ``structured_kv`` extra field attached
    by [Logger][notebrotr.core.logger.Logger]. Records from plain
    ``logging.getLogger()`` calls (used by the models, nips and utils
    layers) are emitted with the same prefix and no trailing pairs.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        return base


def setup_logging(level: int | str = logging.INFO) -> None:
    """Install a [StructuredFormatter][notebrotr.core.logger.StructuredFormatter] on the root logger.

    Replaces existing root handlers so repeated calls do not duplicate
    output.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter carrying the structured context.

    Examples:
        ```python
        logger = Logger("notebrotr.profiles")
        logger.warning("profile_load_failed", pubkey="ab12...", error="timeout")
        # Output: warning notebrotr.profiles profile_load_failed pubkey=ab12... error=timeout
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name passed to ``logging.getLogger(name)``.
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **kwargs,
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if not kwargs:
            return {}
        truncated = {
            k: _truncate(v, self._max_value_length) if isinstance(v, str) else v
            for k, v in kwargs.items()
        }
        return {"structured_kv": truncated}

    def _log(
        self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if self._json_output:
            level_name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, level_name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the active exception traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
