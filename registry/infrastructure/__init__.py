"""Infrastructure: persistence (SQLAlchemy) and cache backends."""
