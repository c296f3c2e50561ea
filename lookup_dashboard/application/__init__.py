"""Application layer: service orchestrators over the read-only store."""
