"""Declension data model.

A Declension holds the twelve case slots of a noun (six cases, singular and
plural) together with the grammatical features and provenance of the data.
Builders mutate it while a source assembles it; once the resolver returns
one it is treated as read-only and may be shared through the cache.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from languages.russian.maps import ANIMACIES, CASES, EMPTY_MARKERS, GENDERS, NUMBERS, PLACEHOLDER
from languages.types import Animacy, Gender, Origin

Forms = dict[str, dict[str, str]]


def empty_forms(fill: str = "") -> Forms:
    """Return a fresh 12-slot form table with every slot set to fill."""
    return {number: {case: fill for case in CASES} for number in NUMBERS}


def is_present(form: object) -> bool:
    """A slot counts as filled iff it holds a non-empty, non-dash string."""
    return isinstance(form, str) and form.strip() not in EMPTY_MARKERS


@dataclass(slots=True)
class NounMetadata:
    """Caller-supplied hints; every field is optional."""
    gender: Gender | None = None
    animacy: Animacy | None = None
    translation: str | None = None
    transliteration: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "NounMetadata":
        """Build metadata from loose input, dropping values of the wrong shape."""
        if not data or not isinstance(data, Mapping):
            return cls()
        gender = data.get("gender")
        animacy = data.get("animacy")
        translation = data.get("translation")
        transliteration = data.get("transliteration")
        return cls(
            gender=gender if gender in GENDERS else None,
            animacy=animacy if animacy in ANIMACIES else None,
            translation=translation if isinstance(translation, str) and translation else None,
            transliteration=transliteration if isinstance(transliteration, str) and transliteration else None,
        )


@dataclass(slots=True)
class Declension:
    """Full case paradigm of a single noun."""
    word: str
    gender: Gender | None = None
    animacy: Animacy = "inanimate"
    forms: Forms = field(default_factory=empty_forms)
    translation: str | None = None
    transliteration: str | None = None
    source_url: str | None = None
    origin: Origin = "rules"
    is_fallback: bool = False
    error: str | None = None
    irregular: bool = False
    note: str | None = None

    @classmethod
    def seeded(cls, word: str, **kwargs: Any) -> "Declension":
        """Declension with every slot pre-filled with the dictionary form."""
        return cls(word=word, forms=empty_forms(word), **kwargs)

    @classmethod
    def placeholder(
        cls, word: str, metadata: NounMetadata | None = None, error: str = "Declension data unavailable"
    ) -> "Declension":
        """Dash-filled declension returned when no source could be trusted."""
        metadata = metadata or NounMetadata()
        return cls(
            word=word,
            gender=metadata.gender,
            animacy=metadata.animacy or "inanimate",
            forms=empty_forms(PLACEHOLDER),
            translation=metadata.translation,
            transliteration=metadata.transliteration,
            origin="placeholder",
            is_fallback=True,
            error=error,
        )

    @property
    def from_primary_source(self) -> bool:
        return self.origin == "primary"

    @property
    def singular(self) -> dict[str, str]:
        return self.forms["singular"]

    @property
    def plural(self) -> dict[str, str]:
        return self.forms["plural"]

    def form(self, case: str, number: str = "singular") -> str | None:
        value = self.forms.get(number, {}).get(case)
        return value if is_present(value) else None

    def present_forms(self) -> list[str]:
        return [
            value
            for number in NUMBERS
            for value in self.forms.get(number, {}).values()
            if is_present(value)
        ]

    def copy(self) -> "Declension":
        """Independent copy; the form table is duplicated, not shared."""
        return Declension(
            word=self.word,
            gender=self.gender,
            animacy=self.animacy,
            forms={number: dict(cases) for number, cases in self.forms.items()},
            translation=self.translation,
            transliteration=self.transliteration,
            source_url=self.source_url,
            origin=self.origin,
            is_fallback=self.is_fallback,
            error=self.error,
            irregular=self.irregular,
            note=self.note,
        )

    def apply_metadata(self, metadata: NounMetadata) -> None:
        """Fill gaps from caller hints; values already set by a source win."""
        if self.gender is None and metadata.gender:
            self.gender = metadata.gender
        if self.animacy is None:
            self.animacy = metadata.animacy or "inanimate"
        if not self.translation and metadata.translation:
            self.translation = metadata.translation
        if not self.transliteration and metadata.transliteration:
            self.transliteration = metadata.transliteration

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys for JSON consumers."""
        data: dict[str, Any] = {
            "word": self.word,
            "gender": self.gender,
            "animacy": self.animacy,
            "forms": {
                number: {case: self.forms.get(number, {}).get(case, "") for case in CASES}
                for number in NUMBERS
            },
            "translation": self.translation,
            "transliteration": self.transliteration,
            "sourceUrl": self.source_url,
            "origin": self.origin,
            "isFallback": self.is_fallback,
            "fromPrimarySource": self.from_primary_source,
            "irregular": self.irregular,
        }
        if self.error:
            data["error"] = self.error
        if self.note:
            data["note"] = self.note
        return data
