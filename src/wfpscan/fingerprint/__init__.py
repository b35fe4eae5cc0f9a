"""Winnowing fingerprint generation."""

from wfpscan.fingerprint.window import GRAM, LIMIT, WINDOW

__all__ = ["GRAM", "LIMIT", "WINDOW"]
