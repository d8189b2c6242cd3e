# /feedloader/domain/feed_item.py
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class FeedItem:
    id: UUID
    description: str | None
    location: str | None
    image_url: str
