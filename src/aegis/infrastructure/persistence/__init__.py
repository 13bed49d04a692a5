"""Database schema management and bootstrap seeding."""
