"""Tests for gram/window ring buffers and the window selector."""

from __future__ import annotations

from wfpscan.fingerprint.hashing import mask_hash
from wfpscan.fingerprint.window import (
    GRAM,
    HASH_SENTINEL,
    LIMIT,
    WINDOW,
    GramBuffer,
    HashWindow,
    WindowSelector,
)


class TestConstants:
    """The gram/window sizes are fixed by the knowledge base."""

    def test_values(self) -> None:
        assert (GRAM, WINDOW, LIMIT) == (30, 64, 10000)


class TestGramBuffer:
    """Test GramBuffer ring buffer."""

    def test_no_gram_until_full(self) -> None:
        """Should not produce a gram before GRAM bytes are pushed."""
        grams = GramBuffer()
        results = [grams.push(ord("a")) for _ in range(GRAM - 1)]

        assert results == [None] * (GRAM - 1)
        assert not grams.full

    def test_first_gram_in_arrival_order(self) -> None:
        """Should return the bytes oldest first once full."""
        grams = GramBuffer(4)
        for byte in b"abc":
            assert grams.push(byte) is None

        assert grams.push(ord("d")) == b"abcd"
        assert grams.full

    def test_slides_by_one(self) -> None:
        """Should drop the oldest byte on every push once full."""
        grams = GramBuffer(4)
        produced = [grams.push(byte) for byte in b"abcdefg"]

        assert produced[3:] == [b"abcd", b"bcde", b"cdef", b"defg"]

    def test_default_size(self) -> None:
        """Should produce GRAM-byte grams by default."""
        grams = GramBuffer()
        gram = None
        for byte in bytes(range(48, 48 + GRAM)):
            gram = grams.push(byte)

        assert gram is not None
        assert len(gram) == GRAM


class TestHashWindow:
    """Test HashWindow ring buffer."""

    def test_starts_with_sentinels(self) -> None:
        """Should hold all-ones sentinels before any push."""
        window = HashWindow(3)

        assert not window.full
        assert window.minimum() == HASH_SENTINEL

    def test_full_after_size_pushes(self) -> None:
        window = HashWindow(3)
        for value in (5, 6, 7):
            window.push(value)

        assert window.full
        assert window.minimum() == 5

    def test_oldest_value_evicted(self) -> None:
        """Should forget the oldest hash when a new one arrives."""
        window = HashWindow(3)
        for value in (1, 9, 8, 7):
            window.push(value)

        assert window.minimum() == 7

    def test_unsigned_comparison(self) -> None:
        """Should compare hashes as unsigned 32-bit values."""
        window = HashWindow(2)
        window.push(0xFFFFFFFE)
        window.push(0x7FFFFFFF)

        assert window.minimum() == 0x7FFFFFFF


class TestWindowSelector:
    """Test WindowSelector winnowing state machine."""

    def test_no_selection_before_full_window(self) -> None:
        selector = WindowSelector(window_size=3)

        assert selector.push(10, line=1) is None
        assert selector.push(20, line=1) is None

    def test_emits_masked_minimum(self) -> None:
        """Should emit the masked minimum with the current line."""
        selector = WindowSelector(window_size=3)
        selector.push(10, line=1)
        selector.push(5, line=1)
        event = selector.push(20, line=2)

        assert event is not None
        assert event.line == 2
        assert event.value == mask_hash(5)

    def test_repeated_minimum_suppressed(self) -> None:
        """Should not emit the same minimum twice in a row."""
        selector = WindowSelector(window_size=3)
        events = [selector.push(value, line=1) for value in (9, 3, 9, 9)]

        assert events[2] is not None
        assert events[3] is None

    def test_new_minimum_after_eviction(self) -> None:
        """Should emit again when the old minimum leaves the window."""
        selector = WindowSelector(window_size=2)
        events = [selector.push(value, line=n) for n, value in enumerate((1, 5, 7), start=1)]

        assert events[1].value == mask_hash(1)
        assert events[2].value == mask_hash(5)
        assert events[2].line == 3

    def test_limit_exhausts_selector(self) -> None:
        """Should stop emitting once the limit is reached."""
        selector = WindowSelector(window_size=1, limit=2)
        events = [selector.push(value, line=1) for value in (4, 3, 2, 1)]

        assert [event is not None for event in events] == [True, True, False, False]
        assert selector.exhausted
        assert selector.emitted == 2
