"""Textual WFP encoding."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable, List

from wfpscan.models import FingerprintEvent, WfpDocument


def format_header(document: WfpDocument) -> str:
    return f"file={document.digest},{document.size},{document.path}"


def format_events(events: Iterable[FingerprintEvent]) -> List[str]:
    """Group consecutive events by source line.

    Produces ``<line>=<hash>[,<hash>...]`` entries with hashes as zero-padded
    lowercase hex, in emission order.
    """
    lines: List[str] = []
    for line, group in groupby(events, key=lambda event: event.line):
        hashes = ",".join(f"{event.value:08x}" for event in group)
        lines.append(f"{line}={hashes}")
    return lines


def encode_document(document: WfpDocument) -> str:
    """Render a document as WFP text, terminated by a newline."""
    return "\n".join([format_header(document), *format_events(document.events)]) + "\n"
