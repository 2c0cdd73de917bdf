"""Services Layer — async orchestration over repository Protocols.

Invariants:
    - Services depend on Protocols, never on Mongo repositories directly
    - Writes are two-phase: prepare() resolves derived fields, commit() writes

Design Decisions:
    - One service per aggregate (events, bookings) plus the slug resolver they share
"""
