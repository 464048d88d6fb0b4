"""Exa API client - adapter for brand-scoped web content search."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError, model_validator

from stayplanner.config import settings
from stayplanner.errors import SearchResultParseError, SourceUnavailable

logger = logging.getLogger(__name__)


class SearchResult(BaseModel):
    """One validated search hit. Missing title -> None, missing text -> ""."""

    url: str
    title: str | None = None
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def _coalesce_text(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            text = data.get("text") or data.get("extract") or ""
            data["text"] = text if isinstance(text, str) else ""
            if not isinstance(data.get("title"), str):
                data["title"] = None
        return data


def parse_search_result(record: Any) -> SearchResult:
    """Validate a single provider record."""
    try:
        result = SearchResult.model_validate(record)
    except ValidationError as e:
        raise SearchResultParseError(f"invalid search record: {e.errors()[0]['msg']}") from e
    if not result.url:
        raise SearchResultParseError("search record has an empty url")
    return result


def parse_search_results(payload: Any) -> list[SearchResult]:
    """
    Validate a provider response.

    Accepts `{"results": [...]}` or a bare list. Bad records are dropped and
    logged; a response that is not a list of records at all raises.
    """
    records = payload.get("results") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise SearchResultParseError("search response has no result list")

    results = []
    for record in records:
        try:
            results.append(parse_search_result(record))
        except SearchResultParseError as e:
            logger.warning(f"Dropping search record: {e}")
    return results


class ExaClient:
    """Adapter for the Exa search-and-contents endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.exa_api_key if api_key is None else api_key
        self._base_url = base_url or settings.exa_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=settings.exa_http_timeout,
                transport=self._transport,
            )
        return self._client

    async def search(
        self,
        query: str,
        *,
        domain: str,
        limit: int,
        max_characters: int,
    ) -> list[SearchResult]:
        """Search one domain. Raises on any transport, HTTP or parse failure."""
        if not self._api_key:
            raise SourceUnavailable(domain, "EXA_API_KEY not configured")

        client = await self._get_client()
        resp = await client.post(
            "/search",
            json={
                "query": query,
                "numResults": limit,
                "includeDomains": [domain],
                "useAutoprompt": False,
                "contents": {"text": {"maxCharacters": max_characters}},
            },
            headers={"x-api-key": self._api_key},
        )
        resp.raise_for_status()
        return parse_search_results(resp.json())

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


exa_client = ExaClient()
