"""
Lazy offset pagination over DUPR list endpoints.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, Optional, TypeVar

from .errors import DecodingError, DuprError

logger = logging.getLogger(__name__)

# Largest page the API will return
PAGE_LIMIT = 25

T = TypeVar("T")


class Termination(str, Enum):
    """How a listing endpoint signals its last page."""

    EMPTY_PAGE = "empty_page"
    HAS_MORE = "has_more"


@dataclass
class Page:
    """One page of raw records plus the server's continuation flag."""

    records: list[Any] = field(default_factory=list)
    has_more: Optional[bool] = None

    @classmethod
    def from_envelope(cls, envelope: dict[str, Any]) -> "Page":
        """
        Build a page from a ``{"result": {"hits": [...], "hasMore": ...}}`` body.

        A missing or non-list ``hits`` is an empty page. ``hasMore`` is read from
        the result object and falls back to the top level of the envelope.
        """
        result = envelope.get("result")
        if not isinstance(result, dict):
            raise DecodingError("Response has no result object")

        hits = result.get("hits")
        if not isinstance(hits, list):
            hits = []

        has_more = result.get("hasMore", envelope.get("hasMore"))
        return cls(records=hits, has_more=has_more is True)


FetchPage = Callable[[int, int], Awaitable[Page]]


class PageStream(Generic[T]):
    """
    Forward-only async iterator over every record of a paginated listing.

    A page is fetched only when the consumer asks for an item past the end of
    the previous one, so stopping early never fetches more. Once exhausted,
    failed or closed, the stream stays finished.

    Example:
        async with client.search_players("Smith") as players:
            async for player in players:
                ...
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        decode: Callable[[Any], T],
        termination: Termination = Termination.EMPTY_PAGE,
        limit: int = PAGE_LIMIT,
    ):
        self.fetch_page = fetch_page
        self.decode = decode
        self.termination = termination
        self.limit = limit
        self.offset = 0
        self._iterator: Optional[AsyncIterator[T]] = None

    def __aiter__(self) -> "PageStream[T]":
        return self

    async def __anext__(self) -> T:
        if self._iterator is None:
            self._iterator = self._iterate()
        return await self._iterator.__anext__()

    async def aclose(self) -> None:
        """Stop the stream; no further pages are requested."""
        if self._iterator is None:
            self._iterator = self._iterate()
        await self._iterator.aclose()

    async def __aenter__(self) -> "PageStream[T]":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def collect(self, max_items: Optional[int] = None) -> list[T]:
        """Drain the stream into a list, stopping after ``max_items`` if given."""
        items: list[T] = []
        if max_items is not None and max_items <= 0:
            await self.aclose()
            return items

        async with self:
            async for item in self:
                items.append(item)
                if max_items is not None and len(items) >= max_items:
                    break
        return items

    async def _iterate(self) -> AsyncIterator[T]:
        while True:
            logger.debug("Fetching page offset=%d limit=%d", self.offset, self.limit)
            page = await self.fetch_page(self.offset, self.limit)

            if not page.records:
                return

            for record in page.records:
                yield self._decode(record)

            self.offset += self.limit

            if self.termination is Termination.HAS_MORE and not page.has_more:
                return

    def _decode(self, record: Any) -> T:
        try:
            return self.decode(record)
        except DuprError:
            raise
        except (ValueError, TypeError, KeyError) as e:
            raise DecodingError(e) from e
