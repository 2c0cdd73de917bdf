"""Slug Resolver — probing behaviour against an in-memory events store.

Tests cover:
    - Free base slug accepted after a single probe
    - Collisions with OTHER records get -1, -2, ... suffixes
    - A slug owned by the record being saved is accepted as-is
    - Titles with no letters/digits are rejected
"""

import pytest

from app.core.errors import InputValidationError
from app.services.slug_resolver import resolve_unique_slug
from tests.fakes import InMemoryEventRepository, make_event


async def test_free_slug_accepted_with_one_probe():
    events = InMemoryEventRepository()
    slug = await resolve_unique_slug("React Summit 2024!", None, events)
    assert slug == "react-summit-2024"
    assert events.probes == ["react-summit-2024"]


async def test_collision_appends_counter():
    events = InMemoryEventRepository([make_event(slug="react-summit-2024")])
    slug = await resolve_unique_slug("React Summit 2024", None, events)
    assert slug == "react-summit-2024-1"
    assert events.probes == ["react-summit-2024", "react-summit-2024-1"]


async def test_second_collision_appends_next_counter():
    events = InMemoryEventRepository([
        make_event(slug="react-summit-2024"),
        make_event(slug="react-summit-2024-1"),
    ])
    assert await resolve_unique_slug("React Summit 2024", None, events) == "react-summit-2024-2"


async def test_slug_owned_by_same_record_is_kept():
    events = InMemoryEventRepository()
    owner = events.seed(make_event(slug="react-summit-2024"))
    slug = await resolve_unique_slug("React Summit 2024", owner.id, events)
    assert slug == "react-summit-2024"
    assert events.probes == ["react-summit-2024"]


async def test_title_without_word_characters_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        await resolve_unique_slug("!!!", None, InMemoryEventRepository())
    assert exc_info.value.field == "title"
