"""
Bindle server — content-addressable package and invoice service.

Application package root. Layered as ports & adapters:

Layers:
    - domain: Invoice model, storage error taxonomy, storage port.
    - application: Use cases and DTOs.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, TOML reply envelope, response schemas.
    - shared: Cross-cutting concerns (serialization, error mapping, logging).
"""
