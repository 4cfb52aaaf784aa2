"""Infrastructure Layer — database access, logging and tracing.

Invariants:
    - Driver exceptions never escape unclassified from repositories (wrapped as TodoError)
"""
