"""Personal finance tracker: bank CSV ingestion, categorization and HTTP API."""

__version__ = "1.0.0"
