"""
Rate limiting configuration.

Uses slowapi to enforce per-endpoint rate limits. Only endpoints decorated
with `limiter.limit(...)` are throttled. Requests over the limit raise
slowapi's RateLimitExceeded, which the error registry maps to CH007 like
any other error.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
