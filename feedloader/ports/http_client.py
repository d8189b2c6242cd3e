# /feedloader/ports/http_client.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    url: str
    status_code: int


@dataclass(frozen=True, slots=True)
class HTTPClientSuccess:
    data: bytes
    response: HTTPResponse


@dataclass(frozen=True, slots=True)
class HTTPClientFailure:
    error: BaseException


HTTPClientResult: TypeAlias = HTTPClientSuccess | HTTPClientFailure


class HTTPClientPort(Protocol):
    def get(self, url: str, completion: Callable[[HTTPClientResult], None]) -> None:
        """GET url; deliver exactly one HTTPClientResult to completion, asynchronously."""
