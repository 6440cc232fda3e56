"""Data store adapter errors."""
