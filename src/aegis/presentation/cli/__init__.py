"""Command-line interface for Aegis."""
