"""API Layer — FastAPI routes, dependencies, response rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON, including errors and routing misses
"""
