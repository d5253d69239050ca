"""Core records, layout size configuration and SQLite schema for a small store."""

__version__ = "0.1.0"
__all__ = ["config", "core", "database"]