"""Environment driven settings."""
import os
from dataclasses import dataclass


def _flag(name: str, default: str) -> bool:
    value = os.getenv(name, default)
    if value not in {"0", "1"}:
        raise ValueError(f"{name} must be '0' or '1', got {value!r}")
    return value == "1"


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_json: bool
    # 0 disables the out-of-bounds alert
    out_of_bounds_alert_threshold: int


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        log_level=os.getenv("VECLITE_LOG_LEVEL", "WARNING").upper(),
        log_json=_flag("VECLITE_LOG_JSON", "1"),
        out_of_bounds_alert_threshold=int(
            os.getenv("VECLITE_OUT_OF_BOUNDS_ALERT_THRESHOLD", "0")
        ),
    )
