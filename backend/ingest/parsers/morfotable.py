"""Russian Wiktionary HTML Parser

Reads the declension table ("morfotable") from a rendered ru.wiktionary
page. Pages vary a lot, so the parser is best-effort:
- Rows are matched to cases by their whole label (Им., Р., Д., ...)
- Cells hold singular then plural forms; "a // b" keeps the first variant
- Without a usable table, inline "род. п. ед. ч. — формы" phrases are tried
"""
from urllib.parse import quote

from bs4 import BeautifulSoup, Tag

from core.errors import AppError, ErrorCode, Result, markup_not_found, try_result
from core.logging import parser_logger
from ingest.parsers.sanitize import clean_text
from languages.russian.maps import (
    EMPTY_MARKERS,
    HTML_ANIMACY_PATTERNS,
    HTML_GENDER_PATTERNS,
    INLINE_CASE_PATTERNS,
    PLACEHOLDER,
    TABLE_CASE_PATTERNS,
)
from languages.russian.paradigm import Declension, empty_forms
from languages.types import Animacy, Gender

log = parser_logger()

DEFAULT_PAGE_URL = "https://ru.wiktionary.org/wiki/"

MIN_CASES_FOR_TABLE = 4
MIN_INLINE_FORMS = 2

MORFOTABLE_CLASSES = frozenset({"morfotable", "ru"})


def infer_gender_from_html(html: str) -> Gender | None:
    """Gender from page markers (муж., жен., ср.), or None."""
    if not html:
        return None
    for gender, pattern in HTML_GENDER_PATTERNS:
        if pattern.search(html):
            return gender
    return None


def infer_animacy_from_html(html: str) -> Animacy:
    """Animacy from page markers (одуш., неодуш.), defaulting to inanimate."""
    if html:
        for animacy, pattern in HTML_ANIMACY_PATTERNS:
            if pattern.search(html):
                return animacy
    return "inanimate"


def _cell_form(cell: Tag) -> str | None:
    form = clean_text(cell.decode_contents())
    if "//" in form:
        form = form.split("//")[0].strip()
    return None if form in EMPTY_MARKERS else form


def _case_for_label(label: str) -> str | None:
    for case, pattern in TABLE_CASE_PATTERNS.items():
        if pattern.match(label):
            return case
    return None


def _classes(tag: Tag) -> set[str]:
    value = tag.get("class") or []
    return set(value.split() if isinstance(value, str) else value)


class MorfotableParser:
    """Extracts a Declension from rendered Russian Wiktionary HTML."""

    def __init__(self, page_url: str = DEFAULT_PAGE_URL):
        self.page_url = page_url

    def find_tables(self, soup: BeautifulSoup) -> list[Tag]:
        """Candidate declension tables: morfotable ru first, then inflection tables."""
        tables = soup.find_all("table")
        morfotables = [t for t in tables if MORFOTABLE_CLASSES <= _classes(t)]
        inflection = [
            t for t in tables
            if not MORFOTABLE_CLASSES <= _classes(t) and any("inflection" in c for c in _classes(t))
        ]
        return morfotables + inflection

    def extract_table_forms(self, table: Tag) -> dict[str, dict[str, str]]:
        """Map table rows to {number: {case: form}}, skipping unlabeled rows.

        Tables nested inside cells are dropped first, so only the outer
        table's own rows and cells are read.
        """
        table = BeautifulSoup(str(table), "html.parser").table
        for nested in table.find_all("table"):
            nested.decompose()

        forms: dict[str, dict[str, str]] = {"singular": {}, "plural": {}}
        for row in table.find_all("tr"):
            cells = row.find_all(["td", "th"], recursive=False)
            if len(cells) < 2:
                continue

            case = _case_for_label(clean_text(cells[0].decode_contents()))
            if case is None:
                continue

            singular = _cell_form(cells[1])
            if singular:
                forms["singular"][case] = singular
            if len(cells) >= 3:
                plural = _cell_form(cells[2])
                if plural:
                    forms["plural"][case] = plural

        return forms

    def extract_inline_forms(self, word: str, text: str) -> dict[str, dict[str, str]] | None:
        """Singular forms from inline case phrases; None below MIN_INLINE_FORMS."""
        singular: dict[str, str] = {}
        for case, pattern in INLINE_CASE_PATTERNS.items():
            match = pattern.search(text)
            if match:
                singular[case] = match.group(1).strip()

        if len(singular) < MIN_INLINE_FORMS:
            return None
        return {"singular": {"nominative": word, **singular}, "plural": {}}

    def find_forms(self, word: str, html: str) -> dict[str, dict[str, str]] | None:
        soup = BeautifulSoup(html, "html.parser")
        for table in self.find_tables(soup):
            forms = self.extract_table_forms(table)
            if len(forms["singular"]) >= MIN_CASES_FOR_TABLE:
                return forms
            log.debug("table_too_sparse", word=word, singular=len(forms["singular"]))

        return self.extract_inline_forms(word, soup.get_text(" "))

    def parse_html(self, word: str, html: str) -> Declension | None:
        """Build a primary-source Declension from a page, or None."""
        if not html:
            return None

        found = self.find_forms(word, html)
        if found is None:
            return None

        forms = empty_forms(PLACEHOLDER)
        for number, cases in found.items():
            forms[number].update(cases)

        return Declension(
            word=word,
            gender=infer_gender_from_html(html),
            animacy=infer_animacy_from_html(html),
            forms=forms,
            source_url=f"{self.page_url}{quote(word)}",
            origin="primary",
        )

    def parse(self, word: str, html: str) -> Result[Declension, AppError]:
        """parse_html as a Result; Err explains why nothing usable was found."""
        if not html or not html.strip():
            return markup_not_found(word, "page body", origin="morfotable_parser")

        result = try_result(
            lambda: self.parse_html(word, html),
            code=ErrorCode.E7000_PARSE_GENERIC,
            origin="morfotable_parser",
        )
        if result.is_err():
            return result
        declension = result.unwrap()
        if declension is None:
            return markup_not_found(word, "declension table", origin="morfotable_parser")
        return result


__all__ = [
    "MorfotableParser",
    "MIN_CASES_FOR_TABLE",
    "MIN_INLINE_FORMS",
    "infer_gender_from_html",
    "infer_animacy_from_html",
]
