"""Command line interface for wfpscan."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from wfpscan.api.client import OsskbClient
from wfpscan.config import ScanConfig
from wfpscan.ingestion.walker import Fingerprinter


console = Console()
app = typer.Typer(help="wfpscan - fingerprint source code and scan it against OSSKB")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def scan(
    paths: Optional[List[str]] = typer.Argument(
        None, help="File or directory to fingerprint (exactly one)."
    ),
    wfp_only: bool = typer.Option(
        False, "--wfp-only", help="Print the fingerprints instead of uploading them"
    ),
    key: Optional[str] = typer.Option(None, "--key", help="Session key, overrides ~/.scanoss-key"),
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="Scan endpoint, overrides ~/.scanoss-url"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Seconds to wait for the scan response (default: no limit)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Fingerprint PATH and print the knowledge base response."""
    _setup_logging(verbose)
    if not paths or len(paths) != 1:
        console.print("Missing path")
        return
    # Kept as typed: the string is recorded verbatim in the WFP headers.
    path = paths[0]
    target = Path(path)
    if not target.is_file() and not target.is_dir():
        console.print("The path specified is not a file")
        return

    wfp = Fingerprinter().fingerprint_path(path)
    if wfp_only:
        typer.echo(wfp.encode("utf-8", errors="surrogateescape"), nl=False)
        return

    config = ScanConfig.from_home(api_key=key, endpoint_url=api_url, timeout=timeout)
    client = OsskbClient(config)
    typer.echo(client.scan(wfp), nl=False)
