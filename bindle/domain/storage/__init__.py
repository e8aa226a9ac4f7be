"""
Storage bounded context — domain layer.

Defines the closed set of storage failures and the port that
storage adapters implement.
"""
