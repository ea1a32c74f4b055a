"""Application layer: DTOs, use cases and shared services."""
