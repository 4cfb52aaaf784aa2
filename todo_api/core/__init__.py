"""Core Layer — task domain types, validation rules, error taxonomy and protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async work performed here (protocols only declare async methods)
"""
