"""
Base Dataclasses for CineCache

Common dataclass base for the movie records exchanged between the
remote client, the local store and the repository.

Design Decisions:
- Dataclass over Pydantic: type safety without runtime overhead at the
  API boundary
- Unknown fields in API payloads are ignored by ``from_dict``
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseDataclass:
    """Common base dataclass for all CineCache records.

    Lenient at external API boundaries (TMDB responses) where extra
    fields may appear; see
    :func:`cinecache.shared.utils.dataclass_serialization.from_dict`.
    """
