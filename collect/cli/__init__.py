"""Command-line interface for collect."""
