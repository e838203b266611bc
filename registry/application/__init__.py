"""Application layer: DTOs, interfaces and resource services."""
