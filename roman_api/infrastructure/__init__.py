"""Infrastructure Layer: cross-cutting concerns (logging, tracing).

Invariants:
    - Infrastructure never imports from api/
"""
