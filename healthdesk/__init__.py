"""Offline medical reference tables and queries over a SQLite disease database."""

__version__ = "0.29.0"