import json
import logging
from typing import Optional

from .config import load_settings


class Counter:
    """Minimal Prometheus-style counter."""

    def __init__(self, name: str, documentation: str):
        self.name = name
        self.documentation = documentation
        self.value = 0.0

    def inc(self, amount: float = 1.0) -> None:
        self.value += amount

    def reset(self) -> None:
        self.value = 0.0

    def render(self) -> str:
        return (
            f"# HELP {self.name} {self.documentation}\n"
            f"# TYPE {self.name} counter\n"
            f"{self.name} {self.value}\n"
        )


# extras attached by veclite log calls
LOGGED_FIELDS = ("index", "length")


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in LOGGED_FIELDS:
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=repr)


PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("veclite")
logger.addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Optional[str] = None, json_output: Optional[bool] = None
) -> logging.Handler:
    """Attach a stream handler to the ``veclite`` logger.

    Unset arguments fall back to ``VECLITE_LOG_LEVEL`` and
    ``VECLITE_LOG_JSON``. Calling again replaces the previous handler.
    """
    global _handler
    settings = load_settings()
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.log_json

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    _handler = handler
    return handler


# Counters
OUT_OF_BOUNDS_COUNTER = Counter(
    "veclite_out_of_bounds_total",
    "Number of remove calls rejected with an out-of-bounds index",
)

COUNTERS = [OUT_OF_BOUNDS_COUNTER]


def _check_threshold(name: str, value: float, threshold: int) -> None:
    if threshold and value >= threshold:
        logger.warning(f"{name} threshold {threshold} reached")


def inc_out_of_bounds() -> None:
    """Count a rejected remove; never raises."""
    OUT_OF_BOUNDS_COUNTER.inc()
    try:
        threshold = load_settings().out_of_bounds_alert_threshold
    except ValueError as exc:
        logger.warning(f"alert threshold check skipped: {exc}")
        return
    _check_threshold(OUT_OF_BOUNDS_COUNTER.name, OUT_OF_BOUNDS_COUNTER.value, threshold)


def reset_counters() -> None:
    for counter in COUNTERS:
        counter.reset()


def generate_metrics() -> bytes:
    return "".join(counter.render() for counter in COUNTERS).encode()


__all__ = [
    "Counter",
    "JSONFormatter",
    "configure_logging",
    "inc_out_of_bounds",
    "reset_counters",
    "generate_metrics",
    "logger",
]
