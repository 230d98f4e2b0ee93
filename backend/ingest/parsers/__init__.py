"""Parsers for scraped Wiktionary markup."""
from ingest.parsers.morfotable import MorfotableParser, infer_animacy_from_html, infer_gender_from_html
from ingest.parsers.sanitize import clean_text, forms_equivalent, normalize_form
from ingest.parsers.wiktionary import WiktionaryParser

__all__ = [
    "MorfotableParser", "infer_gender_from_html", "infer_animacy_from_html",
    "WiktionaryParser",
    "clean_text", "normalize_form", "forms_equivalent",
]
