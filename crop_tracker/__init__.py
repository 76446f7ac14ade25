"""Record farm fields, sowings and harvests in SQLite behind a JSON HTTP API."""

__version__ = "0.1.0"
__all__ = ["__version__"]