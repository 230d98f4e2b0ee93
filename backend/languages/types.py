"""Shared grammatical type definitions."""
from typing import Literal

GrammaticalCase = Literal[
    "nominative", "genitive", "dative", "accusative", "instrumental", "prepositional",
]

GrammaticalNumber = Literal["singular", "plural"]

Gender = Literal["masculine", "feminine", "neuter"]

Animacy = Literal["animate", "inanimate"]

# Which source produced a declension
Origin = Literal["primary", "irregular", "secondary", "rules", "placeholder"]

Difficulty = Literal["common", "intermediate", "advanced"]
