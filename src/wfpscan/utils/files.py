"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Iterator, Optional

from wfpscan.models import SourceFile

LOGGER = logging.getLogger(__name__)


def iter_files(root: str) -> Iterator[str]:
    """Yield regular files below ``root``, depth first.

    Entries are visited in directory listing order and sub-directories are
    descended as they are met. Yielded paths are ``root`` joined with ``/``
    and the entry names, without any normalization, since they end up in
    the WFP headers. Symlinked directories are not followed.
    """
    try:
        names = [child.name for child in Path(root).iterdir()]
    except OSError as exc:
        LOGGER.warning("Cannot list directory %s: %s", root, exc)
        return

    for name in names:
        child_path = f"{root}/{name}"
        child = Path(child_path)
        if child.is_dir():
            if child.is_symlink():
                LOGGER.debug("Not following symlinked directory %s", child_path)
                continue
            yield from iter_files(child_path)
        elif child.is_file():
            yield child_path


def compute_md5(data: bytes) -> str:
    """Compute the MD5 hex digest of ``data``."""
    return hashlib.md5(data).hexdigest()


def read_source(path: str) -> Optional[SourceFile]:
    """Load a file, returning ``None`` when it cannot be read.

    ``path`` is kept verbatim as the path recorded in the WFP header.
    """
    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        LOGGER.warning("Failed to read %s: %s", path, exc)
        return None
    return SourceFile(path=path, content=content)
