"""Services Layer — resource handlers between routes and the persistence gateway.

Invariants:
    - Handlers are stateless; the gateway is passed in per request
    - Handlers raise DomainError subclasses for caller-facing failures
"""
