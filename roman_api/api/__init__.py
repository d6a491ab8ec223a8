"""API Layer: FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never contain conversion logic (delegate to core/)
"""
