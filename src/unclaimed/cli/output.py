"""Rich output formatting helpers for the unclaimed CLI.

Findings go to stdout, one line per unclaimed package::

    [package|status|language] url

The banner and the summary line go to stderr so that stdout stays
pipeable.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict

from rich.console import Console
from rich.text import Text

from unclaimed.core.models import ScanStats, Vulnerability

BANNER = r"""
                 _       _               _
  _  _ _ _  __ _| |__ _ (_)_ __  ___ __| |
 | || | ' \/ _| | / _` || | '  \/ -_) _` |
  \_,_|_||_\__|_|_\__,_||_|_|_|_\___\__,_|
"""

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_banner() -> None:
    """Print the tool banner to stderr."""
    err_console.print(Text(BANNER, style="bold red"))


def format_vulnerability(vuln: Vulnerability) -> str:
    """Plain-text line for one finding."""
    return f"[{vuln.package}|{vuln.status}|{vuln.language.value}] {vuln.url}"


def print_vulnerabilities(vulnerabilities: Sequence[Vulnerability]) -> None:
    """Print one red tag line per finding."""
    for vuln in vulnerabilities:
        line = Text(format_vulnerability(vuln))
        line.stylize("red", 0, line.plain.index("] ") + 1)
        console.print(line, soft_wrap=True)


def print_summary(stats: ScanStats) -> None:
    """Print a one-line run summary to stderr."""
    parts = [
        f"[bold]{stats.urls_accepted}[/bold] URLs scanned",
        f"{stats.packages_checked} packages checked",
    ]
    if stats.urls_failed:
        parts.append(f"[yellow]{stats.urls_failed} skipped[/yellow]")
    if stats.vulnerabilities:
        parts.append(f"[red]{stats.vulnerabilities} unclaimed[/red]")
    else:
        parts.append("[green]0 unclaimed[/green]")
    err_console.print(" | ".join(parts))


def results_to_json(vulnerabilities: Sequence[Vulnerability], stats: ScanStats) -> str:
    """Serialize findings plus run statistics."""
    return json.dumps(
        {
            "stats": asdict(stats),
            "vulnerabilities": [v.as_dict() for v in vulnerabilities],
        },
        indent=2,
    )
