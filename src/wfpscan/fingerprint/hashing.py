"""CRC-32C helpers used by the winnowing pipeline."""

from __future__ import annotations

import struct

from crc32c import crc32c

_UINT32 = struct.Struct("<I")


def gram_hash(gram: bytes) -> int:
    """CRC-32C (Castagnoli) checksum of a complete gram."""
    return crc32c(gram)


def mask_hash(value: int) -> int:
    """Diffuse a selected window minimum before it is emitted.

    The value is hashed again with CRC-32C over its four little-endian bytes,
    so emitted fingerprints do not alias the gram hash space.
    """
    return crc32c(_UINT32.pack(value & 0xFFFFFFFF))
