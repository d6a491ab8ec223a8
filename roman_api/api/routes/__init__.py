"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Explicit registration in main.py
"""
