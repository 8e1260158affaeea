"""persistconf - persistence configuration resolution for SQLite, MongoDB and hybrid storage."""

__version__ = "0.1.0"
