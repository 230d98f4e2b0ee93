"""Language modules.

Russian noun declension lives in languages.russian; this package holds the
shared grammatical vocabulary.
"""
from .types import Animacy, Difficulty, Gender, GrammaticalCase, GrammaticalNumber, Origin

__all__ = [
    "Animacy",
    "Difficulty",
    "Gender",
    "GrammaticalCase",
    "GrammaticalNumber",
    "Origin",
]
