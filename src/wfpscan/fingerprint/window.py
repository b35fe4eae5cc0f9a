"""Fixed-size ring buffers and the winnowing window selector.

GRAM, WINDOW and LIMIT define the fingerprint space shared with the remote
knowledge base. Changing any of them invalidates every stored fingerprint.
"""

from __future__ import annotations

from array import array
from typing import Optional

from wfpscan.models import FingerprintEvent
from wfpscan.fingerprint.hashing import mask_hash

GRAM = 30
WINDOW = 64
LIMIT = 10000

HASH_SENTINEL = 0xFFFFFFFF


class GramBuffer:
    """The most recent ``size`` normalized bytes of the current file."""

    def __init__(self, size: int = GRAM) -> None:
        self.size = size
        self._data = bytearray(size)
        self._cursor = 0
        self._filled = 0

    @property
    def full(self) -> bool:
        return self._filled == self.size

    def push(self, byte: int) -> Optional[bytes]:
        """Append ``byte`` and return the complete gram once the buffer is full."""
        self._data[self._cursor] = byte
        self._cursor = (self._cursor + 1) % self.size
        if self._filled < self.size:
            self._filled += 1
            if self._filled < self.size:
                return None
        # The cursor now points at the oldest byte.
        return bytes(self._data[self._cursor :] + self._data[: self._cursor])


class HashWindow:
    """Ring of the most recent ``size`` gram hashes."""

    def __init__(self, size: int = WINDOW) -> None:
        self.size = size
        self._data = array("L", [HASH_SENTINEL]) * size
        self._cursor = 0
        self._filled = 0

    @property
    def full(self) -> bool:
        return self._filled == self.size

    def push(self, value: int) -> None:
        self._data[self._cursor] = value
        self._cursor = (self._cursor + 1) % self.size
        if self._filled < self.size:
            self._filled += 1

    def minimum(self) -> int:
        return min(self._data)


class WindowSelector:
    """Select local minima over a sliding window of gram hashes.

    Each time the window is full its minimum is compared with the last
    selected value. A new minimum is masked and returned as a
    :class:`FingerprintEvent`; repeated minima are suppressed. After ``limit``
    events the selector reports itself as exhausted.
    """

    def __init__(self, *, window_size: int = WINDOW, limit: int = LIMIT) -> None:
        self.window = HashWindow(window_size)
        self.limit = limit
        self.emitted = 0
        self.last_selected: Optional[int] = None

    @property
    def exhausted(self) -> bool:
        return self.emitted >= self.limit

    def push(self, value: int, line: int) -> Optional[FingerprintEvent]:
        self.window.push(value)
        if not self.window.full or self.exhausted:
            return None

        candidate = self.window.minimum()
        if candidate == self.last_selected:
            return None

        self.last_selected = candidate
        self.emitted += 1
        return FingerprintEvent(line=line, value=mask_hash(candidate))
