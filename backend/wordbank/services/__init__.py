"""Services Layer — one service class per resource family.

Invariants:
    - Services receive validated commands and a resolved user id, never raw input
    - Every operation returns Ok | Failure; only unexpected errors raise
    - Services never build HTTP responses

Design Decisions:
    - Constructor-injected AsyncSession / SessionStore: swapped for test doubles freely
"""
