"""FastAPI application for Aegis."""
