"""Client for the OSSKB direct scan endpoint."""

from __future__ import annotations

import logging

import requests

from wfpscan.config import ScanConfig

LOGGER = logging.getLogger(__name__)

WFP_FIELD = "file"
WFP_FILENAME = "file.wfp"


class OsskbClient:
    """Posts WFP documents and hands back the raw response body."""

    def __init__(self, config: ScanConfig) -> None:
        self.config = config

    def scan(self, wfp: str) -> bytes:
        """Upload ``wfp`` in a single POST.

        Returns the raw response body bytes, or an empty body when the
        request fails. There is no retry.
        """
        files = {
            WFP_FIELD: (
                WFP_FILENAME,
                wfp.encode("utf-8", errors="surrogateescape"),
                "application/octet-stream",
            )
        }
        headers = {"X-Session": self.config.api_key}
        try:
            response = requests.post(
                self.config.endpoint_url,
                files=files,
                headers=headers,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.warning("Scan request to %s failed: %s", self.config.endpoint_url, exc)
            return b""
        return response.content
