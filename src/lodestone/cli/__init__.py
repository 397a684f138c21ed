"""Command-line interface for Lodestone."""
