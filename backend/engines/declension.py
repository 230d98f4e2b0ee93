"""Declension Resolution Engine

Resolves a Russian noun to its full case paradigm by walking an ordered
list of sources and returning the first result that passes validation:

1. PrimaryTableSource      - ru.wiktionary rendered table
2. IrregularSource         - hand-verified irregular nouns
3. SecondaryWikitextSource - en.wiktionary wikitext
4. RuleBasedSource         - suffix rules, last resort

Validated results are cached by word. When every source fails, a
dash-filled placeholder is returned and nothing is cached, so a later call
retries the network.
"""
from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping

from core.config import Settings, get_settings
from core.logging import generate_correlation_id, resolver_logger
from ingest.clients import WiktionaryClient
from ingest.parsers.morfotable import MorfotableParser
from ingest.parsers.wiktionary import WiktionaryParser
from languages.russian.declension import generate_declension
from languages.russian.irregular import get_irregular_declension
from languages.russian.paradigm import Declension, NounMetadata
from languages.russian.validation import is_valid_declension
from languages.russian.vocab import NounEntry

log = resolver_logger()


class DeclensionSource(ABC):
    """One step of the resolution chain."""

    name: str = "source"

    @abstractmethod
    async def lookup(self, word: str, metadata: NounMetadata) -> Declension | None:
        """Return a candidate declension, or None if this source has nothing."""


class PrimaryTableSource(DeclensionSource):
    name = "primary"

    def __init__(self, client: WiktionaryClient, parser: MorfotableParser | None = None):
        self.client = client
        self.parser = parser or MorfotableParser(client.settings.DECLENSION_PRIMARY_PAGE_URL)

    async def lookup(self, word: str, metadata: NounMetadata) -> Declension | None:
        if not word:
            return None
        fetched = await self.client.fetch_page_html(word)
        if fetched.is_err():
            return None

        parsed = self.parser.parse(word, fetched.unwrap())
        if parsed.is_err():
            error = parsed.unwrap_err()
            log.debug("primary_parse_failed", word=word, error_code=error.code.name, message=error.message)
            return None
        return parsed.unwrap()


class IrregularSource(DeclensionSource):
    name = "irregular"

    async def lookup(self, word: str, metadata: NounMetadata) -> Declension | None:
        return get_irregular_declension(word)


class SecondaryWikitextSource(DeclensionSource):
    name = "secondary"

    def __init__(self, client: WiktionaryClient, parser: WiktionaryParser | None = None):
        self.client = client
        self.parser = parser or WiktionaryParser(client.settings.DECLENSION_SECONDARY_PAGE_URL)

    async def lookup(self, word: str, metadata: NounMetadata) -> Declension | None:
        if not word:
            return None
        fetched = await self.client.fetch_wikitext(word)
        if fetched.is_err():
            return None

        parsed = self.parser.parse(word, fetched.unwrap(), metadata)
        if parsed.is_err():
            error = parsed.unwrap_err()
            log.debug("secondary_parse_failed", word=word, error_code=error.code.name, message=error.message)
            return None
        return parsed.unwrap()


class RuleBasedSource(DeclensionSource):
    name = "rules"

    async def lookup(self, word: str, metadata: NounMetadata) -> Declension | None:
        declension = generate_declension(word, metadata.gender, metadata.animacy)
        declension.translation = metadata.translation
        declension.transliteration = metadata.transliteration
        return declension


class DeclensionCache:
    """Word-keyed store of validated declensions.

    Entries live for the process lifetime unless ttl_seconds is set.
    """

    def __init__(self, namespace: str = "declension", ttl_seconds: float | None = None):
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self._entries: dict[str, tuple[Declension, float | None]] = {}

    def get(self, word: str) -> Declension | None:
        entry = self._entries.get(word)
        if entry is None:
            return None
        declension, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._entries[word]
            return None
        return declension

    def set(self, word: str, declension: Declension) -> None:
        expires_at = time.monotonic() + self.ttl_seconds if self.ttl_seconds else None
        self._entries[word] = (declension, expires_at)

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def words(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.get(word) is not None

    def __len__(self) -> int:
        return len(self._entries)


class DeclensionResolver:
    """Ordered fallback chain over declension sources with a result cache."""

    def __init__(
        self,
        sources: list[DeclensionSource],
        cache: DeclensionCache | None = None,
        max_concurrency: int = 8,
    ):
        self.sources = sources
        self.cache = cache if cache is not None else DeclensionCache()
        self.max_concurrency = max_concurrency

    async def _lookup(
        self, source: DeclensionSource, word: str, metadata: NounMetadata, correlation_id: str
    ) -> Declension | None:
        try:
            return await source.lookup(word, metadata)
        except Exception as e:
            log.warning(
                "source_failed",
                word=word,
                source=source.name,
                error_type=type(e).__name__,
                error=str(e),
                correlation_id=correlation_id,
            )
            return None

    async def resolve(
        self,
        word: str,
        metadata: NounMetadata | Mapping[str, Any] | None = None,
    ) -> Declension:
        """Resolve word to a declension. Never raises for bad input or upstream failures."""
        key = word.strip() if isinstance(word, str) else ""
        meta = metadata if isinstance(metadata, NounMetadata) else NounMetadata.from_mapping(metadata)

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        correlation_id = generate_correlation_id()
        for source in self.sources:
            candidate = await self._lookup(source, key, meta, correlation_id)
            if candidate is None:
                continue
            if not is_valid_declension(candidate):
                log.info("declension_untrusted", word=key, source=source.name, correlation_id=correlation_id)
                continue

            candidate.apply_metadata(meta)
            self.cache.set(key, candidate)
            log.info(
                "declension_resolved",
                word=key,
                source=source.name,
                is_fallback=candidate.is_fallback,
                correlation_id=correlation_id,
            )
            return candidate

        log.warning("declension_unavailable", word=key, correlation_id=correlation_id)
        return Declension.placeholder(key, meta)

    async def resolve_many(
        self,
        words: Iterable[str],
        metadata_by_word: Mapping[str, NounMetadata | Mapping[str, Any]] | None = None,
    ) -> list[Declension]:
        """Resolve several words concurrently; results keep input order."""
        metadata_by_word = metadata_by_word or {}
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded(word: str) -> Declension:
            async with semaphore:
                return await self.resolve(word, metadata_by_word.get(word))

        return list(await asyncio.gather(*(bounded(w) for w in words)))

    async def resolve_noun(self, entry: NounEntry) -> Declension:
        return await self.resolve(entry.word, entry.metadata())

    def clear_cache(self) -> int:
        cleared = self.cache.clear()
        log.info("declension_cache_cleared", entries=cleared)
        return cleared


def default_sources(client: WiktionaryClient) -> list[DeclensionSource]:
    return [
        PrimaryTableSource(client),
        IrregularSource(),
        SecondaryWikitextSource(client),
        RuleBasedSource(),
    ]


def build_resolver(client: WiktionaryClient, settings: Settings | None = None) -> DeclensionResolver:
    """Compose the default source chain and cache from settings."""
    settings = settings or client.settings or get_settings()
    return DeclensionResolver(
        sources=default_sources(client),
        cache=DeclensionCache(namespace="declension", ttl_seconds=settings.DECLENSION_CACHE_TTL),
        max_concurrency=settings.DECLENSION_MAX_CONCURRENCY,
    )
