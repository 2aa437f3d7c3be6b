"""Infrastructure — database, session store, password hashing, logging.

Invariants:
    - Everything here does IO or holds process-wide resources
    - Core never imports from infrastructure
"""
