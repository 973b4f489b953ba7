"""API Layer — request pipeline, FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error body is {"error": message}

Design Decisions:
    - Thin routes delegate to services/resource_handlers
"""
