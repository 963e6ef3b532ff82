"""``unclaimed classify`` — Dry run of the URL classifier.

Prints each accepted URL with its kind (manifest / code_file). No network
access happens; useful for checking an input list before a scan.
"""

from __future__ import annotations

from typing import TextIO

import click

from unclaimed.core.classifier import classify_url, filter_urls


@click.command("classify")
@click.option(
    "-i", "--input", "input_file",
    type=click.File("r"), default="-",
    help="File with one URL per line (default: stdin).",
)
def classify_command(input_file: TextIO) -> None:
    """List the URLs a scan would fetch, with their classification."""
    for url in filter_urls(input_file.read().splitlines()):
        click.echo(f"{classify_url(url).kind.value}\t{url}")
