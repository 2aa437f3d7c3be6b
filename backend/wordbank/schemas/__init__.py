"""Pydantic Schemas — command validation and response DTOs for API endpoints.

Invariants:
    - Commands validate at system boundary (body, query, path)
    - DTOs are the only shapes serialized into {"data": ...}

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
