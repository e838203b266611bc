"""Registry service: cached CRUD and search over books and players."""

__version__ = "1.0.0"
