"""Source aggregator - fans one search out per brand under a per-source deadline."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from stayplanner.config import settings
from stayplanner.errors import SourceUnavailable
from stayplanner.schemas.hotel import Brand, Hotel
from stayplanner.services.exa_client import SearchResult, exa_client
from stayplanner.services.hotel_normalizer import BRAND_SOURCES, normalize_results

logger = logging.getLogger(__name__)


class ContentSearchProvider(Protocol):
    async def search(
        self, query: str, *, domain: str, limit: int, max_characters: int
    ) -> list[SearchResult]: ...


class SourceStatus(str, Enum):
    OK = "ok"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass
class SourceResult:
    """Outcome of one brand sub-search. Failed sources carry no hotels."""
    brand: Brand
    status: SourceStatus
    hotels: list[Hotel] = field(default_factory=list)
    elapsed_ms: int = 0
    error: str | None = None


def build_query(brand: Brand, location: str) -> str:
    if location:
        return f"{brand.value} hotel in {location}:"
    return f"{brand.value} hotel:"


class SourceAggregator:
    """Coordinates brand-scoped searches and tolerates any subset failing."""

    def __init__(
        self,
        provider: ContentSearchProvider | None = None,
        *,
        timeout: float | None = None,
        limit: int | None = None,
        max_characters: int | None = None,
    ):
        self._provider = provider or exa_client
        self._timeout = settings.source_timeout_seconds if timeout is None else timeout
        self._limit = limit or settings.source_result_limit
        self._max_characters = max_characters or settings.source_max_characters

    async def collect(self, location: str) -> list[SourceResult]:
        """
        Run every brand sub-search concurrently.

        Each sub-search is bounded by its own deadline, so the join never
        waits longer than the slowest deadline. Results come back in fixed
        brand order whatever the completion order.
        """
        location = location.strip()
        results = await asyncio.gather(
            *(self._search_brand(brand, location) for brand in Brand)
        )

        ok = sum(1 for r in results if r.status == SourceStatus.OK)
        total = sum(len(r.hotels) for r in results)
        logger.info(f"Brand search '{location}': {ok}/{len(results)} sources ok, {total} hotels")
        return list(results)

    async def search(self, location: str) -> list[Hotel]:
        """Concatenated hotels of every source that answered in time."""
        return [hotel for result in await self.collect(location) for hotel in result.hotels]

    async def _search_brand(self, brand: Brand, location: str) -> SourceResult:
        start = time.monotonic()
        source = BRAND_SOURCES[brand]
        task = asyncio.ensure_future(
            self._provider.search(
                build_query(brand, location),
                domain=source.domain,
                limit=self._limit,
                max_characters=self._max_characters,
            )
        )

        try:
            done, _ = await asyncio.wait({task}, timeout=self._timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if not done:
            # Abandon without awaiting the unwind; a late result is never merged
            task.cancel()
            task.add_done_callback(_discard_late_result)
            unavailable = SourceUnavailable(brand.value, f"timed out after {self._timeout:g}s")
            logger.warning(str(unavailable))
            return SourceResult(
                brand=brand,
                status=SourceStatus.TIMEOUT,
                elapsed_ms=_elapsed_ms(start),
                error=unavailable.reason,
            )

        try:
            hotels = normalize_results(task.result(), brand, location)
        except Exception as e:
            unavailable = SourceUnavailable(brand.value, str(e) or type(e).__name__)
            logger.warning(str(unavailable))
            return SourceResult(
                brand=brand,
                status=SourceStatus.ERROR,
                elapsed_ms=_elapsed_ms(start),
                error=unavailable.reason,
            )

        return SourceResult(
            brand=brand,
            status=SourceStatus.OK,
            hotels=hotels,
            elapsed_ms=_elapsed_ms(start),
        )


def _discard_late_result(task: asyncio.Future) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"Abandoned brand search finished late with {type(error).__name__}: {error}")


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


source_aggregator = SourceAggregator()
