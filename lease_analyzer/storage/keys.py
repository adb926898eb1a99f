import re
import threading
from collections.abc import Callable
from datetime import datetime

KEY_PREFIX = "contracts"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_file_name(file_name: str) -> str:
    return _UNSAFE_CHARS.sub("_", file_name)


def to_epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def build_storage_key(file_name: str, epoch_millis: int) -> str:
    """Build contracts/<epoch millis>-<sanitized name>."""
    return f"{KEY_PREFIX}/{epoch_millis}-{sanitize_file_name(file_name)}"


class UploadClock:
    """Epoch-millis source that never returns the same value twice.

    Two uploads landing in the same millisecond get consecutive values, so
    same-named files in one batch still map to distinct keys.
    """

    def __init__(self, clock: Callable[[], datetime]) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._last = 0

    def next_millis(self) -> int:
        millis = to_epoch_millis(self._clock())
        with self._lock:
            if millis <= self._last:
                millis = self._last + 1
            self._last = millis
        return millis
