"""
Application layer package.

Use cases orchestrate the storage port and return DTOs.
They never build HTTP responses.
"""
