"""Command-line interface for phpformat."""
