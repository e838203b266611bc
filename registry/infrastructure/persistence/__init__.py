"""Persistence: database session management, ORM models, mappers, repositories."""
