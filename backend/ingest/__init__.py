"""Data Ingestion Package

Fetches and parses declension data from:
- Russian Wiktionary rendered HTML (morfotable)
- English Wiktionary wikitext (parse API)
"""
from ingest.clients import WiktionaryClient
from ingest.parsers.morfotable import MorfotableParser
from ingest.parsers.sanitize import clean_text
from ingest.parsers.wiktionary import WiktionaryParser

__all__ = [
    "WiktionaryClient",
    "MorfotableParser",
    "WiktionaryParser",
    "clean_text",
]
