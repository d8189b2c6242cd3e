# /feedloader/ports/feed_loader.py
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from feedloader.domain.remote_feed_loader import LoadFeedResult


class FeedLoaderPort(Protocol):
    def load(self, completion: Callable[[LoadFeedResult], None]) -> None:
        """Load the feed once; deliver a single LoadFeedResult to completion."""
