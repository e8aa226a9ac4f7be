"""
Interfaces layer package.

Contains FastAPI routers, the TOML reply envelope and response
schemas. Routes call use cases and return replies.
"""
