"""Fingerprint files and directory trees into one WFP document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from wfpscan.fingerprint.encoder import encode_document
from wfpscan.fingerprint.window import LIMIT
from wfpscan.fingerprint.winnowing import build_document
from wfpscan.ingestion.classifier import classify
from wfpscan.models import SourceFile
from wfpscan.utils.files import iter_files, read_source

LOGGER = logging.getLogger(__name__)


def wfp_for_source(source: SourceFile, *, limit: int = LIMIT) -> str:
    """WFP text for a single file, empty when the file is blacklisted."""
    reason = classify(source.path, source.content)
    if reason is not None:
        LOGGER.debug("Skipping %s (%s)", source.path, reason)
        return ""
    return encode_document(build_document(source, limit=limit))


@dataclass(slots=True)
class ScanStats:
    fingerprinted: int = 0
    skipped: int = 0
    failed: int = 0

    def increment(self, status: str) -> None:
        if status == "fingerprinted":
            self.fingerprinted += 1
        elif status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1


class Fingerprinter:
    """Walks paths and concatenates the per-file WFP blocks.

    Paths are plain strings as given by the caller; they are recorded in the
    headers exactly as passed, or joined with ``/`` below a directory.
    """

    def __init__(self, *, limit: int = LIMIT) -> None:
        self.limit = limit
        self.stats = ScanStats()

    def fingerprint_file(self, path: str) -> str:
        """Fingerprint one file. I/O failures yield an empty block."""
        source = read_source(path)
        if source is None:
            self.stats.increment("failed")
            return ""

        wfp = wfp_for_source(source, limit=self.limit)
        self.stats.increment("fingerprinted" if wfp else "skipped")
        return wfp

    def fingerprint_tree(self, root: str) -> str:
        """Fingerprint every file below ``root`` in traversal order."""
        return "".join(self.fingerprint_file(path) for path in iter_files(root))

    def fingerprint_path(self, path: str) -> str:
        if Path(path).is_dir():
            wfp = self.fingerprint_tree(path)
        else:
            wfp = self.fingerprint_file(path)
        LOGGER.info(
            "Fingerprinted: %s, skipped: %s, failed: %s",
            self.stats.fingerprinted,
            self.stats.skipped,
            self.stats.failed,
        )
        return wfp
