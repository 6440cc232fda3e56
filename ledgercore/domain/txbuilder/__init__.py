"""Transaction build and submission errors."""
