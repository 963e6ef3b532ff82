"""unclaimed CLI — Dependency-confusion exposure scanner.

Entry point for the ``unclaimed`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan     — Check manifest/source URLs for unclaimed package names.
    classify — Print which input URLs would be scanned (no network).

Usage::

    cat urls.txt | unclaimed scan
    unclaimed scan -i urls.txt -t 50 --format json
    unclaimed classify -i urls.txt
"""

from __future__ import annotations

import click

from unclaimed import __version__
from unclaimed.cli.classify_cmd import classify_command
from unclaimed.cli.scan import scan_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """unclaimed: Find dependency names nobody has registered yet.

    Extracts package names from package.json, requirement lists and
    JavaScript/TypeScript sources, then reports the ones missing from
    npm or PyPI. Nothing is ever published or registered.
    """


cli.add_command(scan_command)
cli.add_command(classify_command)
