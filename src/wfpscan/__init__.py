"""wfpscan - winnowing fingerprints for open source knowledge base lookups."""

__version__ = "0.1.0"
