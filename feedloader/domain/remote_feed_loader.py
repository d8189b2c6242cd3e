# /feedloader/domain/remote_feed_loader.py
from __future__ import annotations

import logging
import weakref
from collections.abc import Callable

from feedloader.domain.feed_items_mapper import FeedItemsMapper
from feedloader.domain.load_result import (
    LoaderError,
    LoadFeedFailure,
    LoadFeedResult,
    LoadFeedSuccess,
)
from feedloader.ports.http_client import (
    HTTPClientFailure,
    HTTPClientPort,
    HTTPClientResult,
    HTTPClientSuccess,
)

LOG = logging.getLogger("domain.remote_feed_loader")

__all__ = [
    "LoaderError",
    "LoadFeedFailure",
    "LoadFeedResult",
    "LoadFeedSuccess",
    "RemoteFeedLoader",
]


class RemoteFeedLoader:
    """
    Loads the feed at a fixed URL through an injected HTTP client port.
    Holds only immutable configuration; every load() is independent.

    The client callback keeps a weak reference to the loader. Once the loader
    is garbage-collected or close()d, late transport results are dropped and
    the caller's completion is never invoked.
    """

    def __init__(self, url: str, client: HTTPClientPort) -> None:
        self._url = url
        self._client = client
        self._closed = False

    @property
    def url(self) -> str:
        return self._url

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        # Does not cancel in-flight requests; it only suppresses their delivery.
        self._closed = True

    def load(self, completion: Callable[[LoadFeedResult], None]) -> None:
        url = self._url
        loader_ref = weakref.ref(self)

        def _on_result(result: HTTPClientResult) -> None:
            loader = loader_ref()
            if loader is None or loader.closed:
                LOG.debug("load.dropped", extra={"extra": {"url": url}})
                return
            completion(loader._map(result, url))

        self._client.get(url, _on_result)

    @staticmethod
    def _map(result: HTTPClientResult, url: str) -> LoadFeedResult:
        match result:
            case HTTPClientSuccess(data=data, response=response):
                mapped = FeedItemsMapper.map(data, response.status_code)
                if isinstance(mapped, LoadFeedFailure):
                    LOG.debug(
                        "load.invalid_data",
                        extra={
                            "extra": {
                                "url": url,
                                "status": response.status_code,
                                "bytes": len(data),
                            }
                        },
                    )
                return mapped
            case HTTPClientFailure(error=error):
                LOG.warning(
                    "load.connectivity",
                    extra={"extra": {"url": url, "error": type(error).__name__}},
                )
                return LoadFeedFailure(LoaderError.CONNECTIVITY)
