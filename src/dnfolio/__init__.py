"""dnfolio — content indexer for the dnfolio blog."""

__version__ = "0.4.0"
