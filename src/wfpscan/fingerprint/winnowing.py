"""Winnowing pipeline: raw bytes in, line-tagged fingerprints out."""

from __future__ import annotations

from typing import Iterator

from wfpscan.fingerprint.hashing import gram_hash
from wfpscan.fingerprint.normalizer import normalize
from wfpscan.fingerprint.window import GRAM, LIMIT, WINDOW, GramBuffer, WindowSelector
from wfpscan.models import FingerprintEvent, SourceFile, WfpDocument
from wfpscan.utils.files import compute_md5

_NEWLINE = ord("\n")


def iter_fingerprints(content: bytes, *, limit: int = LIMIT) -> Iterator[FingerprintEvent]:
    """Yield the winnowing fingerprints of ``content`` in emission order.

    Lines are counted on raw newline bytes before normalization, so every
    event carries the line of the byte that completed its gram.
    """
    grams = GramBuffer(GRAM)
    selector = WindowSelector(window_size=WINDOW, limit=limit)
    line = 1

    for byte in content:
        if byte == _NEWLINE:
            line += 1
        normalized = normalize(byte)
        if normalized is None:
            continue

        gram = grams.push(normalized)
        if gram is None:
            continue

        event = selector.push(gram_hash(gram), line)
        if event is not None:
            yield event
        if selector.exhausted:
            return


def build_document(source: SourceFile, *, limit: int = LIMIT) -> WfpDocument:
    """Fingerprint a source file into a :class:`WfpDocument`."""
    return WfpDocument(
        path=source.path,
        digest=compute_md5(source.content),
        size=source.size,
        events=list(iter_fingerprints(source.content, limit=limit)),
    )
