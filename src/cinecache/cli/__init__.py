"""Command-line interface for CineCache."""
