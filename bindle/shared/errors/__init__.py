"""
Shared error handling package.

Centralizes storage-error-to-HTTP mapping so that domain errors
are consistently translated into TOML replies.
"""
