"""``unclaimed scan`` — Check URLs for unclaimed dependency names.

Reads candidate URLs (one per line) from stdin or ``--input``, keeps the
ones pointing at manifests or JS/TS sources, and reports every referenced
package the public registry does not know.

Usage::

    cat urls.txt | unclaimed scan
    unclaimed scan -i urls.txt -t 50 --silent
    unclaimed scan -i urls.txt --format json

Exit Codes:
    0 — Scan completed (with or without findings).
    2 — Invalid options or configuration file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import click

from unclaimed.cli.output import (
    print_banner,
    print_summary,
    print_vulnerabilities,
    results_to_json,
)
from unclaimed.config import MAX_CONCURRENCY, ScanConfig, load_config
from unclaimed.core.models import ScanStats
from unclaimed.core.pipeline import scan
from unclaimed.exceptions import ConfigError


def _configure_logging(verbose: bool) -> None:
    """Route debug logging to stderr through Rich when ``--verbose`` is set."""
    if not verbose:
        return
    from rich.logging import RichHandler

    from unclaimed.cli.output import err_console

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    # Connection-level chatter from the HTTP stack.
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _build_config(
    config_path: Path | None,
    threads: int | None,
    timeout: float | None,
    insecure: bool,
) -> ScanConfig:
    """Merge defaults, the optional YAML file, and CLI flags."""
    try:
        base = load_config(config_path) if config_path else ScanConfig()
        return base.with_overrides(
            concurrency=threads,
            timeout=timeout,
            verify_tls=False if insecure else None,
        )
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc


@click.command("scan")
@click.option(
    "-i", "--input", "input_file",
    type=click.File("r"), default="-",
    help="File with one URL per line (default: stdin).",
)
@click.option(
    "-t", "--threads", type=int, default=None,
    help=f"Number of workers per pool, clamped to 1-{MAX_CONCURRENCY} (default 20).",
)
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification.")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None, help="YAML configuration file.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]), default="text",
    help="Output format (default: text).",
)
@click.option("--silent", is_flag=True, help="Suppress banner and summary.")
@click.option("-v", "--verbose", is_flag=True, help="Log absorbed errors to stderr.")
def scan_command(
    input_file: TextIO,
    threads: int | None,
    timeout: float | None,
    insecure: bool,
    config_path: Path | None,
    output_format: str,
    silent: bool,
    verbose: bool,
) -> None:
    """Scan manifest and source URLs for unclaimed package names.

    Examples:

        cat urls.txt | unclaimed scan

        unclaimed scan -i urls.txt -t 50 --format json
    """
    _configure_logging(verbose)
    config = _build_config(config_path, threads, timeout, insecure)

    text_mode = output_format == "text"
    if text_mode and not silent:
        print_banner()

    lines = [line for line in input_file.read().splitlines() if line.strip()]
    if not lines:
        if not text_mode:
            click.echo(results_to_json([], ScanStats()))
        return

    vulnerabilities, stats = scan(lines, config)

    if text_mode:
        print_vulnerabilities(vulnerabilities)
        if not silent:
            print_summary(stats)
    else:
        click.echo(results_to_json(vulnerabilities, stats))
