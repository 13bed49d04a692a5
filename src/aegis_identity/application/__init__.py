"""Application layer for the identity domain."""
