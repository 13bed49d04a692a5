"""Aegis - authentication and role-based access control backend."""

__version__ = "1.0.0"
