"""Application layer: read-only queries over the billing repository."""
