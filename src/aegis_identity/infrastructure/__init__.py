"""Infrastructure adapters for the identity domain."""
