"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic (except errors)
    - All external calls wrapped with timeout/error mapping
"""
