"""veclite: a list wrapper with space-separated rendering and list helpers."""
from .container import Vel, Veclite, vel
from .exceptions import OutOfBoundsError, VecliteError
from .observability import configure_logging, generate_metrics

__all__ = [
    "Veclite",
    "Vel",
    "vel",
    "OutOfBoundsError",
    "VecliteError",
    "configure_logging",
    "generate_metrics",
]
