"""Command-line interface for unclaimed."""
