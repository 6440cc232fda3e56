"""Access token management errors."""
