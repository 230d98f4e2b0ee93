"""Wiktionary Wikitext Parser

Extracts noun features and case forms from English Wiktionary wikitext:
- Gender and animacy markers
- Transliteration and English gloss
- Case forms from `nom_sg=`-style and positional template parameters
- Full declension tables for the secondary lookup source
"""
from urllib.parse import quote
import re

from core.errors import AppError, ErrorCode, Result, markup_not_found, try_result
from core.logging import parser_logger
from languages.russian.declension import generate_declension
from languages.russian.maps import (
    CASES,
    WIKI_ANIMACY_PATTERNS,
    WIKI_CASE_MAP,
    WIKI_GENDER_PATTERNS,
    WIKI_NUMBER_MAP,
)
from languages.russian.paradigm import Declension, NounMetadata
from languages.types import Animacy, Gender

log = parser_logger()

DEFAULT_PAGE_URL = "https://en.wiktionary.org/wiki/"


class WiktionaryParser:
    """Parser for English Wiktionary wikitext of Russian nouns."""

    __slots__ = (
        "_section_pattern",
        "_template_pattern",
        "_link_pattern",
        "_noun_table_pattern",
        "_named_form_patterns",
        "_positional_pattern",
        "_transliteration_pattern",
        "_gloss_link_pattern",
        "_gloss_line_pattern",
        "_lang_sections",
        "page_url",
    )

    def __init__(self, page_url: str = DEFAULT_PAGE_URL):
        self._section_pattern = re.compile(r"^(={2,})\s*(.+?)\s*\1\s*$", re.MULTILINE)
        self._template_pattern = re.compile(r"\{\{([^}]+)\}\}")
        self._link_pattern = re.compile(r"\[\[([^\]|]+)(?:\|[^\]]+)?\]\]")
        self._noun_table_pattern = re.compile(r"\{\{ru-noun-table\|([^}]+)\}\}")
        self._named_form_patterns = {
            (case, number): re.compile(rf"\|{code}_{num_code}=([^|}}\n]+)", re.IGNORECASE)
            for code, case in WIKI_CASE_MAP.items()
            for num_code, number in WIKI_NUMBER_MAP.items()
        }
        self._positional_pattern = re.compile(r"\|([1-6])=([^|}\n]+)")
        self._transliteration_pattern = re.compile(r"\|tr=([^|}\n]+)")
        self._gloss_link_pattern = re.compile(r"# \[\[([^\]]+)\]\]")
        self._gloss_line_pattern = re.compile(r"# ([^\n]+)")
        self._lang_sections = {"Russian", "Русский"}
        self.page_url = page_url

    def strip_wiki_markup(self, value: str | None) -> str:
        """Clean one template parameter value down to the bare form."""
        if not value:
            return ""
        text = value.strip()
        # Links keep their target text
        text = self._link_pattern.sub(r"\1", text)
        text = self._template_pattern.sub("", text)
        text = re.sub(r"<[^>]+>", "", text)
        text = text.replace("&nbsp;", " ")
        text = text.replace("'", "")
        return text.strip()

    def russian_section(self, wikitext: str) -> str:
        """Return the ==Russian== L2 section, or the whole text if absent."""
        if not wikitext:
            return ""

        start: int | None = None
        for match in self._section_pattern.finditer(wikitext):
            level = len(match.group(1))
            if level != 2:
                continue
            if start is not None:
                return wikitext[start:match.start()]
            if match.group(2) in self._lang_sections:
                start = match.end()

        return wikitext[start:] if start is not None else wikitext

    def extract_gender(self, wikitext: str) -> Gender | None:
        if not wikitext:
            return None
        for gender, pattern in WIKI_GENDER_PATTERNS:
            if pattern.search(wikitext):
                return gender
        return None

    def extract_animacy(self, wikitext: str) -> Animacy:
        """Animacy marker, defaulting to inanimate."""
        if wikitext:
            for animacy, pattern in WIKI_ANIMACY_PATTERNS:
                if pattern.search(wikitext):
                    return animacy
        return "inanimate"

    def extract_transliteration(self, wikitext: str) -> str | None:
        match = self._transliteration_pattern.search(wikitext or "")
        return match.group(1).strip() if match else None

    def extract_translation(self, wikitext: str) -> str | None:
        """First English definition line, preferring a bare linked term."""
        if not wikitext:
            return None

        match = self._gloss_link_pattern.search(wikitext)
        if match:
            return match.group(1).strip()

        match = self._gloss_line_pattern.search(wikitext)
        if match:
            gloss = re.sub(r"\[\[|\]\]|\{\{|\}\}", "", match.group(1).strip())
            return gloss or None

        return None

    def extract_case_forms(self, wikitext: str) -> dict[str, dict[str, str]]:
        """Collect explicitly stated forms as {number: {case: form}}.

        Named `gen_sg=`-style parameters fill both numbers; positional `|1=`
        through `|6=` map onto singular cases in order and win over named ones.
        """
        forms: dict[str, dict[str, str]] = {"singular": {}, "plural": {}}
        if not wikitext:
            return forms

        for (case, number), pattern in self._named_form_patterns.items():
            match = pattern.search(wikitext)
            if match:
                value = self.strip_wiki_markup(match.group(1))
                if value:
                    forms[number][case] = value

        for match in self._positional_pattern.finditer(wikitext):
            value = self.strip_wiki_markup(match.group(2))
            if value:
                forms["singular"][CASES[int(match.group(1)) - 1]] = value

        return forms

    def parse_full_declension(
        self,
        word: str,
        wikitext: str,
        metadata: NounMetadata | None = None,
    ) -> Declension:
        """Build a declension from a wikitext page.

        Every slot starts as the dictionary form. Caller metadata takes
        precedence over page markers for gender, animacy and translation.
        """
        metadata = metadata or NounMetadata()
        text = self.russian_section(wikitext or "")

        declension = Declension.seeded(
            word,
            gender=metadata.gender or self.extract_gender(text),
            animacy=metadata.animacy or self.extract_animacy(text),
            translation=metadata.translation or self.extract_translation(text),
            transliteration=self.extract_transliteration(text) or metadata.transliteration,
            source_url=f"{self.page_url}{quote(word)}",
            origin="secondary",
        )

        # The template only names the stem; expand it with the regular rules
        if self._noun_table_pattern.search(text) and declension.gender:
            generated = generate_declension(word, declension.gender, declension.animacy)
            declension.forms["singular"].update(generated.forms["singular"])

        for number, cases in self.extract_case_forms(text).items():
            declension.forms[number].update(cases)

        log.debug(
            "wikitext_parsed",
            word=word,
            gender=declension.gender,
            forms=len(declension.present_forms()),
        )
        return declension

    def parse(
        self, word: str, wikitext: str, metadata: NounMetadata | None = None
    ) -> Result[Declension, AppError]:
        """parse_full_declension wrapped in a Result; Err when the page is empty."""
        if not wikitext or not wikitext.strip():
            return markup_not_found(word, "wikitext", origin="wiktionary_parser")
        return try_result(
            lambda: self.parse_full_declension(word, wikitext, metadata),
            code=ErrorCode.E7000_PARSE_GENERIC,
            origin="wiktionary_parser",
        )
