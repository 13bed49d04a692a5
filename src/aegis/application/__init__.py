"""Application layer ports for external collaborators."""
