"""Todo API — task REST service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
