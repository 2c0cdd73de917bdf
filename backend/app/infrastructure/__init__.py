"""Infrastructure Layer — MongoDB connection provider and structured logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver calls wrapped with error mapping (mongo_errors)
"""
