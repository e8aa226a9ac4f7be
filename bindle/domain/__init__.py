"""
Domain layer package.

Contains the invoice model, the storage error taxonomy and the
storage port. No web framework imports, no IO.
"""
