"""Slug Resolver — derive a slug from a title and probe the store until it is free.

Invariants:
    - One find_id_by_slug probe per candidate, candidates in order base, base-1, base-2, ...
    - A candidate owned by the record being saved (same id) is accepted as-is
    - Unique among OTHER records at probe time only; the unique index on events.slug
      backstops the probe-then-write gap (see EventService.save)
"""

import logging

from app.core.domain_types import Slug
from app.core.errors import InputValidationError
from app.core.repository_protocols import EventRepository
from app.core.slugs import generate_slug, slug_candidates

logger = logging.getLogger(__name__)


async def resolve_unique_slug(
    title: str, record_id: str | None, events: EventRepository,
) -> Slug:
    """Return the first candidate slug that is free or already owned by record_id."""
    base = generate_slug(title)
    if not base:
        raise InputValidationError(
            "Title must contain at least one letter or digit", "title",
        )

    for attempt, candidate in enumerate(slug_candidates(base)):
        owner = await events.find_id_by_slug(candidate)
        if owner is None or (record_id is not None and owner == record_id):
            if attempt:
                logger.info(
                    f"Slug '{base}' taken, using '{candidate}'",
                    extra={"slug": candidate, "attempt": attempt},
                )
            return Slug(candidate)
