"""Command-line interface for stanag-clip."""
