"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is an envelope: {"data": ...} or {"error": {...}}

Design Decisions:
    - Thin routes: validate → resolve session → service → envelope
"""
