"""Slug Derivation — pure title → URL-safe slug transforms.

Invariants:
    - generate_slug output contains only ASCII lowercase letters, digits and single
      hyphens, with no leading/trailing hyphen
    - slug_candidates yields base, base-1, base-2, ... (unbounded, lazy)
    - No IO here; uniqueness probing lives in services/slug_resolver.py

Design Decisions:
    - re.ASCII: word characters are ASCII letters/digits/underscore only, so
      "Café Night" → "caf-night" rather than keeping non-ASCII letters in URLs
"""

import re
from collections.abc import Iterator

_DISALLOWED = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)


def generate_slug(text: str) -> str:
    """Lowercase, strip punctuation, collapse separators into single hyphens."""
    slug = text.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def slug_candidates(base: str) -> Iterator[str]:
    """Yield base, then base-1, base-2, ... for collision resolution."""
    yield base
    counter = 1
    while True:
        yield f"{base}-{counter}"
        counter += 1
