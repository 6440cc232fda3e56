"""
Shared module package.

Contains cross-cutting concerns used across subsystems:
- Error registry, classification and HTTP mapping
- Rate limiting
- Logging configuration
"""
