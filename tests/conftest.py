import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))

from veclite import observability


@pytest.fixture(autouse=True)
def clean_observability(monkeypatch):
    for key in [
        "VECLITE_LOG_LEVEL",
        "VECLITE_LOG_JSON",
        "VECLITE_OUT_OF_BOUNDS_ALERT_THRESHOLD",
    ]:
        monkeypatch.delenv(key, raising=False)
    observability.reset_counters()
    yield
    if observability._handler is not None:
        observability.logger.removeHandler(observability._handler)
        observability._handler = None
    observability.logger.setLevel("NOTSET")
