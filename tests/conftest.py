# tests/conftest.py
from __future__ import annotations

import gc
import weakref
from collections.abc import Callable, Iterator

import pytest


@pytest.fixture
def track_for_memory_leaks() -> Iterator[Callable[[object], None]]:
    """Register objects that must be collectable once the test drops them."""
    refs: list[weakref.ref] = []

    def track(obj: object) -> None:
        refs.append(weakref.ref(obj))

    yield track

    gc.collect()
    leaked = [r() for r in refs if r() is not None]
    assert not leaked, f"instances should have been deallocated: {leaked}"
