"""Logging setup for prop-ledger: console output, plain or JSON lines."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty below WARNING
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single console handler on the root logger.

    Any handlers already attached to the root logger are dropped, so calling
    this twice does not duplicate output.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for pipe-separated text, ``"json"`` for one object per line.
    stream : TextIO | None
        Destination, stdout by default.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("prop_ledger").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render each record as a JSON object; ``record.extra`` keys are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "extra", None) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        # Decimals and dates in extra fields
        return json.dumps(payload, default=str)


class CollectionLogAdapter(logging.LoggerAdapter):
    """Tag every record with the collection it concerns.

    The fields land in ``record.extra`` so ``JsonFormatter`` emits them as
    top-level keys; the standard formatter gets a ``[collection]`` prefix.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        fields = dict(self.extra or {})
        fields.update(kwargs.pop("extra", {}) or {})
        kwargs["extra"] = {"extra": fields}
        return f"[{fields.get('collection', '-')}] {msg}", kwargs


def get_logger(name: str, collection: str | None = None) -> logging.Logger | CollectionLogAdapter:
    """Return the logger ``name``, wrapped in a ``CollectionLogAdapter`` if ``collection`` is set."""
    logger = logging.getLogger(name)
    if collection is None:
        return logger
    return CollectionLogAdapter(logger, {"collection": collection})
