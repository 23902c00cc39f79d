"""Command-line interface for the fence designer."""
