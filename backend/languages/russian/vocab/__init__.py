"""Curated noun list - candidate words for declension quizzes."""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from languages.russian.paradigm import NounMetadata

VOCAB_DIR = Path(__file__).parent
NOUNS_FILE = VOCAB_DIR / "nouns.yaml"

DIFFICULTY_LEVELS = ["common", "intermediate", "advanced"]


@dataclass(slots=True)
class NounEntry:
    """Single noun with the features a resolver call expects as metadata."""
    word: str
    gender: str
    animacy: str
    difficulty: str = "common"
    frequency: int = 5
    translation: str = ""

    def metadata(self) -> NounMetadata:
        return NounMetadata.from_mapping({
            "gender": self.gender,
            "animacy": self.animacy,
            "translation": self.translation,
        })


def _load_yaml(filepath: Path) -> dict:
    """Load YAML file, return empty dict if not found."""
    if not filepath.exists():
        return {}
    with filepath.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_nouns() -> tuple[NounEntry, ...]:
    """Load every noun from nouns.yaml, in file order."""
    data = _load_yaml(NOUNS_FILE)
    return tuple(
        NounEntry(
            word=item["word"],
            gender=item["gender"],
            animacy=item["animacy"],
            difficulty=item.get("difficulty", "common"),
            frequency=int(item.get("frequency", 5)),
            translation=item.get("translation", ""),
        )
        for item in data.get("nouns", [])
    )


def nouns_by_difficulty(difficulty: str = "advanced") -> list[NounEntry]:
    """Nouns up to and including the given tier; "advanced" returns all."""
    if difficulty not in DIFFICULTY_LEVELS:
        raise ValueError(f"Unknown difficulty '{difficulty}', expected one of {DIFFICULTY_LEVELS}")
    limit = DIFFICULTY_LEVELS.index(difficulty)
    return [n for n in load_nouns() if DIFFICULTY_LEVELS.index(n.difficulty) <= limit]


def nouns_by_gender(gender: str, difficulty: str = "advanced") -> list[NounEntry]:
    return [n for n in nouns_by_difficulty(difficulty) if n.gender == gender]


def get_noun(word: str) -> NounEntry | None:
    return next((n for n in load_nouns() if n.word == word), None)


def all_words() -> list[str]:
    return [n.word for n in load_nouns()]


__all__ = [
    "NounEntry",
    "DIFFICULTY_LEVELS",
    "load_nouns",
    "nouns_by_difficulty",
    "nouns_by_gender",
    "get_noun",
    "all_words",
]
