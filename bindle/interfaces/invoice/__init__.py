"""Invoice routes, schemas and dependencies."""
