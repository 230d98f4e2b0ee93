"""Declension API

Resolves Russian nouns to full case paradigms. Upstream failures never
surface as HTTP errors: a noun nobody could decline comes back as a
placeholder with isFallback set.
"""
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.config import get_settings
from core.errors import out_of_range, raise_result, required_field
from core.logging import api_logger
from engines.declension import DeclensionResolver
from languages.russian.irregular import get_irregular_declension, irregular_words
from languages.russian.paradigm import Declension, NounMetadata
from languages.types import Animacy, Gender

router = APIRouter()
log = api_logger()


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FormsResponse(CamelModel):
    singular: dict[str, str]
    plural: dict[str, str]


class DeclensionResponse(CamelModel):
    word: str
    gender: str | None
    animacy: str | None
    forms: FormsResponse
    translation: str | None = None
    transliteration: str | None = None
    source_url: str | None = None
    origin: str
    is_fallback: bool
    from_primary_source: bool
    irregular: bool = False
    error: str | None = None
    note: str | None = None

    @classmethod
    def from_declension(cls, declension: Declension) -> "DeclensionResponse":
        return cls(
            word=declension.word,
            gender=declension.gender,
            animacy=declension.animacy,
            forms=FormsResponse(singular=dict(declension.singular), plural=dict(declension.plural)),
            translation=declension.translation,
            transliteration=declension.transliteration,
            source_url=declension.source_url,
            origin=declension.origin,
            is_fallback=declension.is_fallback,
            from_primary_source=declension.from_primary_source,
            irregular=declension.irregular,
            error=declension.error,
            note=declension.note,
        )


class MetadataIn(CamelModel):
    gender: Gender | None = None
    animacy: Animacy | None = None
    translation: str | None = None
    transliteration: str | None = None


class BatchRequest(CamelModel):
    words: list[str] = []
    metadata: dict[str, MetadataIn] = {}


class BatchResponse(CamelModel):
    results: list[DeclensionResponse]
    fallback_count: int


class IrregularListResponse(CamelModel):
    words: list[str]
    declensions: list[DeclensionResponse]


class CacheClearResponse(CamelModel):
    cleared: int


def get_resolver(request: Request) -> DeclensionResolver:
    return request.app.state.resolver


@router.get("/irregular", response_model=IrregularListResponse)
async def list_irregular():
    """Nouns with hand-verified declensions."""
    words = irregular_words()
    return IrregularListResponse(
        words=words,
        declensions=[DeclensionResponse.from_declension(get_irregular_declension(w)) for w in words],
    )


@router.delete("/cache", response_model=CacheClearResponse)
async def clear_cache(resolver: DeclensionResolver = Depends(get_resolver)):
    return CacheClearResponse(cleared=resolver.clear_cache())


@router.post("/batch", response_model=BatchResponse)
async def resolve_batch(body: BatchRequest, resolver: DeclensionResolver = Depends(get_resolver)):
    """Resolve up to DECLENSION_BATCH_LIMIT nouns concurrently."""
    words = [w.strip() for w in body.words if w and w.strip()]
    if not words:
        raise_result(required_field("words", origin="declension_api"))

    limit = get_settings().DECLENSION_BATCH_LIMIT
    if len(words) > limit:
        raise_result(out_of_range("words", len(words), max_value=limit, origin="declension_api"))

    metadata = {
        word.strip(): NounMetadata.from_mapping(meta.model_dump())
        for word, meta in body.metadata.items()
        if word and word.strip()
    }
    declensions = await resolver.resolve_many(words, metadata)
    results = [DeclensionResponse.from_declension(d) for d in declensions]
    fallback_count = sum(1 for d in declensions if d.is_fallback)

    log.info("batch_resolved", words=len(words), fallbacks=fallback_count)
    return BatchResponse(results=results, fallback_count=fallback_count)


@router.get("/{word}", response_model=DeclensionResponse)
async def resolve_word(
    word: str,
    gender: Gender | None = Query(None),
    animacy: Animacy | None = Query(None),
    translation: str | None = Query(None),
    transliteration: str | None = Query(None),
    resolver: DeclensionResolver = Depends(get_resolver),
):
    """Full declension of a noun; metadata only fills gaps left by sources."""
    metadata = NounMetadata(
        gender=gender,
        animacy=animacy,
        translation=translation,
        transliteration=transliteration,
    )
    declension = await resolver.resolve(word, metadata)
    return DeclensionResponse.from_declension(declension)
