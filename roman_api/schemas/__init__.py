"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Fields are snake_case in Python, camelCase on the wire (alias_generator)
"""
