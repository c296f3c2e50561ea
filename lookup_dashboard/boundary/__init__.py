"""Boundary adapters for external systems (the read-only jobs database)."""
