"""Upstream Wiktionary HTTP Clients

Thin async fetchers over a shared httpx.AsyncClient. Each call is bounded
by a TimeoutPolicy and returns a Result; transport failures, HTTP errors and
API error envelopes all come back as Err so callers never see an exception.
"""
from __future__ import annotations

from urllib.parse import quote

import httpx

from core.config import Settings, get_settings
from core.errors import (
    AppError,
    ErrorCode,
    Ok,
    Result,
    http_status_error,
    network_error,
    source_unavailable,
)
from core.logging import source_logger
from core.resilience import TimeoutPolicy

log = source_logger()


def create_http_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Shared client for all upstream lookups; pass transport to fake the network."""
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=settings.DECLENSION_REQUEST_TIMEOUT,
        headers={"User-Agent": settings.DECLENSION_USER_AGENT},
        follow_redirects=True,
        transport=transport,
    )


class WiktionaryClient:
    """Fetches rendered Russian Wiktionary pages and English Wiktionary wikitext."""

    def __init__(self, http: httpx.AsyncClient, settings: Settings | None = None):
        self.http = http
        self.settings = settings or get_settings()
        self._timeout = self.settings.DECLENSION_REQUEST_TIMEOUT

    async def _get(self, url: str, **kwargs) -> Result[httpx.Response, AppError]:
        try:
            response = await self.http.get(url, **kwargs)
        except httpx.TimeoutException as e:
            return network_error(
                f"Timed out fetching {url}",
                code=ErrorCode.E1002_TIMEOUT,
                url=url,
                origin="wiktionary_client",
                cause=e,
            )
        except httpx.HTTPError as e:
            return network_error(
                f"Request to {url} failed: {e}",
                url=url,
                origin="wiktionary_client",
                cause=e,
            )

        if not response.is_success:
            return http_status_error(url, response.status_code, origin="wiktionary_client")
        return Ok(response)

    async def fetch_page_html(self, word: str) -> Result[str, AppError]:
        """Rendered HTML of the ru.wiktionary page for word."""
        url = f"{self.settings.DECLENSION_PRIMARY_URL}{quote(word, safe='')}"
        policy = TimeoutPolicy(self._timeout, operation_name="primary_fetch")

        async def fetch() -> Result[str, AppError]:
            result = await self._get(url, headers={"Accept": "text/html"})
            return result.map(lambda response: response.text)

        result = await policy.execute(fetch)
        if result.is_err():
            log.info("primary_fetch_failed", word=word, error_code=result.unwrap_err().code.name)
        return result

    async def fetch_wikitext(self, word: str) -> Result[str, AppError]:
        """Raw wikitext of the en.wiktionary page for word via the parse API."""
        url = self.settings.DECLENSION_SECONDARY_URL
        params = {
            "action": "parse",
            "page": word,
            "prop": "wikitext",
            "format": "json",
            "origin": "*",
        }
        policy = TimeoutPolicy(self._timeout, operation_name="secondary_fetch")

        async def fetch() -> Result[str, AppError]:
            result = await self._get(url, params=params, headers={"Accept": "application/json"})
            if result.is_err():
                return result
            try:
                data = result.unwrap().json()
            except ValueError as e:
                return source_unavailable("en.wiktionary", "response is not JSON", origin="wiktionary_client", cause=e)

            if not isinstance(data, dict):
                return source_unavailable("en.wiktionary", "unexpected response shape", origin="wiktionary_client")
            if data.get("error"):
                info = data["error"].get("info", "") if isinstance(data["error"], dict) else str(data["error"])
                return source_unavailable("en.wiktionary", info, origin="wiktionary_client")

            parse = data.get("parse") or {}
            if not isinstance(parse, dict):
                return source_unavailable("en.wiktionary", "unexpected response shape", origin="wiktionary_client")

            # formatversion=2 returns the wikitext as a plain string
            wikitext = parse.get("wikitext") or ""
            if isinstance(wikitext, dict):
                wikitext = wikitext.get("*") or ""
            if not isinstance(wikitext, str):
                return source_unavailable("en.wiktionary", "unexpected response shape", origin="wiktionary_client")
            return Ok(wikitext)

        result = await policy.execute(fetch)
        if result.is_err():
            log.info("secondary_fetch_failed", word=word, error_code=result.unwrap_err().code.name)
        return result
