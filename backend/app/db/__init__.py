"""Document Store — MongoDB repositories and index declarations.

Invariants:
    - One repository per collection, each satisfying a Protocol in core/repository_protocols.py
    - PyMongo types (ObjectId, cursors) never leave this package

Design Decisions:
    - PyMongo's native asyncio client over an ODM: the app needs a handful of queries,
      and pydantic already validates documents
"""
