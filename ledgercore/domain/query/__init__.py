"""Query and filter evaluation errors."""
