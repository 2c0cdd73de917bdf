"""API Layer — FastAPI routes and global error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON; errors share one envelope

Design Decisions:
    - Thin routes delegate to services; repositories injected with Depends
"""
