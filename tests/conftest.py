from __future__ import annotations

from types import SimpleNamespace
from typing import Callable, Dict

import pytest
import requests

STAR_PAGE = '<html><body><span id="repo-stars-counter-star"> {stars} </span></body></html>'


class DummyResponse:
    def __init__(self, text: str = "", status_code: int = 200, reason: str = "OK") -> None:
        self._text = text
        self.status_code = status_code
        self.reason = reason
        self.closed = False
        self.content_read = False

    @property
    def content(self) -> bytes:
        self.content_read = True
        return self._text.encode("utf-8")

    def close(self) -> None:
        self.closed = True


def fake_session(routes: Dict[str, object]) -> SimpleNamespace:
    """Build a session whose ``get`` serves ``routes``.

    A route value may be a :class:`DummyResponse` or an exception instance to raise.
    Every requested URL is appended to ``session.requested``.
    """

    requested: list[str] = []

    def fake_get(url, timeout=None, stream=False):
        requested.append(url)
        if url not in routes:
            raise requests.ConnectionError(f"Connection refused: {url}")
        outcome = routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return SimpleNamespace(get=fake_get, headers={}, requested=requested)


@pytest.fixture
def make_session() -> Callable[[Dict[str, object]], SimpleNamespace]:
    return fake_session


@pytest.fixture
def star_page() -> Callable[[str], DummyResponse]:
    return lambda stars: DummyResponse(STAR_PAGE.format(stars=stars))
