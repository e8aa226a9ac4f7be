"""
Shared module package.

Contains cross-cutting concerns used across layers:
- TOML serialization
- Storage error to HTTP mapping
- Logging configuration
"""
