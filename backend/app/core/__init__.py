"""Core Layer — pure domain logic: slugs, schedule normalizers, URI normalizer, errors.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (no IO, no async)

Design Decisions:
    - Functional core separated from imperative shell; repository Protocols are the seam
"""
