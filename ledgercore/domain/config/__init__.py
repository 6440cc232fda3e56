"""Core configuration errors."""
