"""API Schemas — Pydantic response models for the HTTP boundary.

Invariants:
    - Schemas describe the public contract; storage shapes live in models/
"""
