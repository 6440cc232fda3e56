"""Blockchain protocol errors."""
