# /feedloader/domain/load_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from feedloader.domain.feed_item import FeedItem


class LoaderError(str, Enum):
    CONNECTIVITY = "connectivity"  # transport delivered no response
    INVALID_DATA = "invalid_data"  # response delivered but rejected


@dataclass(frozen=True, slots=True)
class LoadFeedSuccess:
    items: list[FeedItem] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class LoadFeedFailure:
    error: LoaderError


LoadFeedResult: TypeAlias = LoadFeedSuccess | LoadFeedFailure
