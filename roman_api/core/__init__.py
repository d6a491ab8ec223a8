"""Core Layer: pure conversion logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Conversion functions are pure and deterministic
"""
