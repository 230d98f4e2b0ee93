"""Declension trust checks.

Scraped markup fails silently: a parser that misses the table tends to
return the input word in every slot, or the same row twice. These checks
reject such results before they are cached or shown as authoritative.
"""
from typing import Any, Mapping

from core.logging import parser_logger
from languages.russian.maps import EMPTY_MARKERS
from languages.russian.paradigm import Declension, NounMetadata

log = parser_logger()

MIN_REQUIRED_FORMS = 8
MIN_SINGULAR_FOR_UNIFORMITY = 4


def _form_tables(declension: Declension | Mapping[str, Any] | None) -> tuple[Any, Any] | None:
    if declension is None:
        return None
    if isinstance(declension, Declension):
        forms = declension.forms
    elif isinstance(declension, Mapping):
        forms = declension.get("forms") or declension.get("declension")
    else:
        return None
    if not isinstance(forms, Mapping):
        return None
    return forms.get("singular"), forms.get("plural")


def _counted(cases: Mapping[str, Any]) -> list[str]:
    return [v for v in cases.values() if isinstance(v, str) and v and v not in EMPTY_MARKERS]


def _reject(word: str, reason: str, **details) -> bool:
    log.debug("declension_rejected", word=word, reason=reason, **details)
    return False


def is_valid_declension(declension: Declension | Mapping[str, Any] | None) -> bool:
    """Return True if the declension looks like real paradigm data.

    Accepts a Declension or a plain mapping carrying the form table under
    "forms" (or "declension").
    """
    tables = _form_tables(declension)
    if tables is None:
        return False
    singular, plural = tables
    if not isinstance(singular, Mapping) or not isinstance(plural, Mapping):
        return False

    word = declension.word if isinstance(declension, Declension) else str(declension.get("word", ""))

    singular_forms = _counted(singular)
    plural_forms = _counted(plural)
    all_forms = singular_forms + plural_forms

    if len(all_forms) < MIN_REQUIRED_FORMS:
        return _reject(word, "too_few_forms", found=len(all_forms))

    if any(not form.strip() for form in all_forms):
        return _reject(word, "blank_form")

    if len(set(all_forms)) == 1:
        return _reject(word, "all_forms_identical")

    if len(singular_forms) >= MIN_SINGULAR_FOR_UNIFORMITY and len(set(singular_forms)) == 1:
        return _reject(word, "singular_uniform")

    singular_set = set(singular_forms)
    plural_set = set(plural_forms)
    overlap = singular_set & plural_set
    if singular_set and len(overlap) == len(singular_set) == len(plural_set):
        return _reject(word, "singular_equals_plural")

    return True


def format_for_display(declension: Declension | None, metadata: NounMetadata | None = None) -> Declension:
    """Return declension if it passes validation, otherwise a dash placeholder."""
    if declension is not None and is_valid_declension(declension):
        return declension

    metadata = metadata or NounMetadata()
    if declension is None:
        return Declension.placeholder("", metadata)

    placeholder = Declension.placeholder(declension.word, metadata)
    placeholder.gender = declension.gender or metadata.gender
    placeholder.animacy = declension.animacy or metadata.animacy or "inanimate"
    placeholder.translation = declension.translation or metadata.translation
    placeholder.transliteration = declension.transliteration or metadata.transliteration
    placeholder.source_url = declension.source_url
    return placeholder
