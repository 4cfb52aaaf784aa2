"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas validate at the system boundary only
    - Every schema converts to/from core types explicitly (to_domain/from_domain)
"""
