"""Command-line interface for Rift."""
