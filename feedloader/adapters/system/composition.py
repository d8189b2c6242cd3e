# /feedloader/adapters/system/composition.py
from __future__ import annotations

import logging

from feedloader.adapters.http.aiohttp_client import AiohttpHTTPClient
from feedloader.domain.remote_feed_loader import RemoteFeedLoader
from feedloader.ports.http_client import HTTPClientPort

LOG = logging.getLogger("adapter.composition")

# Event-loop dependent objects are created lazily:
_client: AiohttpHTTPClient | None = None


def _get_client() -> AiohttpHTTPClient:
    """Build the shared aiohttp client the first time a loader needs it."""
    global _client
    if _client is None:
        _client = AiohttpHTTPClient()  # creates connector/session lazily
    return _client


def make_remote_feed_loader(url: str, client: HTTPClientPort | None = None) -> RemoteFeedLoader:
    loader = RemoteFeedLoader(url, client if client is not None else _get_client())
    LOG.info("loader.created", extra={"extra": {"url": url}})
    return loader
