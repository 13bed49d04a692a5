"""Identity domain: users, roles, permissions and their relationships."""
