"""Application configuration defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)

DEFAULT_API_URL = "https://osskb.org/api/scan/direct"
KEY_FILE_NAME = ".scanoss-key"
URL_FILE_NAME = ".scanoss-url"


def _read_setting(path: Path) -> str | None:
    """Return the trimmed contents of a single-line settings file, if any."""
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return None


@dataclass(slots=True)
class ScanConfig:
    api_key: str = ""
    endpoint_url: str = DEFAULT_API_URL
    timeout: float | None = None

    @classmethod
    def from_home(
        cls,
        home: Path | None = None,
        *,
        api_key: str | None = None,
        endpoint_url: str | None = None,
        timeout: float | None = None,
    ) -> "ScanConfig":
        """Resolve settings from the home directory files.

        ``~/.scanoss-key`` supplies the session key and ``~/.scanoss-url``
        replaces the default endpoint. Explicit arguments win over both.
        ``timeout`` has no settings file and is taken as given.
        """
        home = home if home is not None else Path.home()
        config = cls()

        stored_key = _read_setting(home / KEY_FILE_NAME)
        if stored_key is not None:
            config.api_key = stored_key
        stored_url = _read_setting(home / URL_FILE_NAME)
        if stored_url:
            config.endpoint_url = stored_url

        if api_key is not None:
            config.api_key = api_key
        if endpoint_url is not None:
            config.endpoint_url = endpoint_url
        config.timeout = timeout
        return config
