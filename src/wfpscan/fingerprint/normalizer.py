"""Byte normalization ahead of gram construction."""

from __future__ import annotations

from typing import Optional

_ZERO = ord("0")
_NINE = ord("9")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")


def normalize(byte: int) -> Optional[int]:
    """Return the canonical form of ``byte`` or ``None`` when it is discarded.

    Digits and lowercase letters pass through, uppercase letters are folded to
    lowercase and everything else (whitespace, punctuation, control and
    non-ASCII bytes) is dropped. Works on raw byte values so the result does
    not depend on the file encoding or the current locale.
    """
    if byte < _ZERO or byte > _LOWER_Z:
        return None
    if byte <= _NINE or byte >= _LOWER_A:
        return byte
    if _UPPER_A <= byte <= _UPPER_Z:
        return byte + 32
    return None
