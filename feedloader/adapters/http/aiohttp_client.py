# /feedloader/adapters/http/aiohttp_client.py
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import aiohttp

from feedloader.config import settings
from feedloader.ports.http_client import (
    HTTPClientFailure,
    HTTPClientResult,
    HTTPClientSuccess,
    HTTPResponse,
)

LOG = logging.getLogger("adapter.http_client")


class UnexpectedValuesRepresentation(Exception):
    """Transport finished with neither an error nor a usable response."""


class AiohttpHTTPClient:
    """
    Callback-style HTTP client over aiohttp.
    Each get() schedules its own task on the running loop, so requests start
    immediately and complete independently of each other.
    The session is loop-aware: if get() is called from a different loop than
    the one that built the session, the session is rebuilt for the new loop.
    """

    def __init__(self) -> None:
        self._connector: aiohttp.TCPConnector | None = None
        self._timeout = aiohttp.ClientTimeout(total=settings.TIMEOUT_SECONDS)
        self._session: aiohttp.ClientSession | None = None
        self._max_bytes = settings.MAX_BYTES
        self._loop: asyncio.AbstractEventLoop | None = None  # track owning loop
        self._tasks: set[asyncio.Task[None]] = set()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()

        if self._loop is not None and self._loop is not loop:
            # old session belonged to a different (likely closed) loop.
            # Detach it before awaiting so concurrent callers build one new session.
            stale = self._session
            self._session = None
            self._connector = None
            self._loop = None
            if stale is not None and not stale.closed:
                await stale.close()

        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                limit=settings.CONCURRENCY,
                limit_per_host=settings.PER_HOST_LIMIT,
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                timeout=self._timeout,
                raise_for_status=False,
            )
            self._loop = loop

        return self._session

    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        """
        Start a GET for url and return immediately. completion receives exactly
        one HTTPClientResult, on the event loop thread. Must be called with a
        running loop.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run(url, completion))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            LOG.error(
                "request_task_failed",
                exc_info=exc,
                extra={"extra": {"error": type(exc).__name__, "detail": str(exc)}},
            )

    async def _run(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        data, response, error = await self._fetch(url)
        completion(self.interpret(data, response, error))

    async def _fetch(
        self, url: str
    ) -> tuple[bytes | None, HTTPResponse | None, BaseException | None]:
        try:
            sess = await self._ensure_session()
            LOG.info("fetching", extra={"extra": {"url": url, "verify_tls": settings.VERIFY_TLS}})
            async with sess.get(url, ssl=settings.VERIFY_TLS, allow_redirects=True) as resp:
                body = bytearray()
                async for chunk in resp.content.iter_chunked(64 * 1024):
                    body.extend(chunk)
                    if len(body) > self._max_bytes:
                        LOG.warning(
                            "body_truncated",
                            extra={"extra": {"url": url, "max": self._max_bytes}},
                        )
                        break
                response = HTTPResponse(url=str(resp.url), status_code=resp.status)
                return bytes(body[: self._max_bytes]), response, None
        except (TimeoutError, aiohttp.ClientError) as e:
            LOG.warning(
                "fetch_failed",
                extra={"extra": {"url": url, "error": type(e).__name__, "detail": str(e)}},
            )
            return None, None, e

    @staticmethod
    def interpret(
        data: bytes | None,
        response: HTTPResponse | None,
        error: BaseException | None,
    ) -> HTTPClientResult:
        if error is not None:
            return HTTPClientFailure(error)
        if response is not None:
            return HTTPClientSuccess(data if data is not None else b"", response)
        return HTTPClientFailure(UnexpectedValuesRepresentation())

    async def drain(self) -> None:
        """
        Wait for every in-flight request (and its completion) to finish.
        Task failures are already logged by _on_task_done and are not re-raised.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            self._connector = None
            self._loop = None
