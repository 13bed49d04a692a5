"""Infrastructure adapters for the Aegis application."""
