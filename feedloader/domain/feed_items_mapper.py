# /feedloader/domain/feed_items_mapper.py
from __future__ import annotations

import re
from typing import Annotated
from uuid import UUID

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    TypeAdapter,
    ValidationError,
)

from feedloader.domain.feed_item import FeedItem
from feedloader.domain.load_result import (
    LoaderError,
    LoadFeedFailure,
    LoadFeedResult,
    LoadFeedSuccess,
)

OK_200 = 200

_URL = TypeAdapter(AnyUrl)
_UUID_36 = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def _hyphenated_uuid(value: object) -> object:
    # Only the 8-4-4-4-12 form; no bare hex, braces or urn prefix.
    if isinstance(value, str) and not _UUID_36.fullmatch(value):
        raise ValueError(f"not a hyphenated UUID: {value!r}")
    return value


def _url_string(value: str) -> str:
    # Validate only; the original string is what FeedItem carries.
    try:
        _URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"not a URL: {value!r}") from e
    return value


# ==== Wire schema ====


class _Item(BaseModel):
    id: Annotated[UUID, BeforeValidator(_hyphenated_uuid)]
    description: str | None = None
    location: str | None = None
    image: Annotated[str, AfterValidator(_url_string)]

    def to_feed_item(self) -> FeedItem:
        return FeedItem(
            id=self.id,
            description=self.description,
            location=self.location,
            image_url=self.image,
        )


class _Root(BaseModel):
    items: list[_Item]

    def to_feed(self) -> list[FeedItem]:
        return [item.to_feed_item() for item in self.items]


# ==== Mapper ====


class FeedItemsMapper:
    """Turns a delivered HTTP response (body + status) into a LoadFeedResult."""

    @staticmethod
    def map(data: bytes, status_code: int) -> LoadFeedResult:
        if status_code != OK_200:
            return LoadFeedFailure(LoaderError.INVALID_DATA)

        try:
            root = _Root.model_validate_json(data)
        except ValidationError:
            return LoadFeedFailure(LoaderError.INVALID_DATA)

        return LoadFeedSuccess(root.to_feed())
