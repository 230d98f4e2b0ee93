"""Rule-based Russian noun declension.

Suffix substitution for the regular singular paradigms. Last-resort guesses
only: stress-dependent spelling, fleeting vowels, consonant mutation and
irregular stems are not modelled, and the plural is left untouched.
"""
from languages.russian.paradigm import Declension
from languages.types import Animacy, Gender

HARD_MASCULINE_EXCLUDED = "ьйяеёюи"

# Spelling rule: ы is written и after velars and hushing sibilants
VELARS_AND_SIBILANTS = "гкхжчшщ"

# Singular endings per paradigm; "strip" is how many trailing letters are
# replaced. None keeps the nominative form.
DECLENSION_PATTERNS = {
    "masc_hard": {
        "name": "Masculine hard consonant",
        "strip": 0,
        "endings": {
            "genitive": "а",
            "dative": "у",
            "accusative": None,
            "instrumental": "ом",
            "prepositional": "е",
        },
    },
    "masc_soft": {
        "name": "Masculine -ь/-й",
        "strip": 1,
        "endings": {
            "genitive": "я",
            "dative": "ю",
            "accusative": None,
            "instrumental": "ем",
            "prepositional": "е",
        },
    },
    "fem_a": {
        "name": "Feminine -а",
        "strip": 1,
        "endings": {
            "genitive": "ы",
            "dative": "е",
            "accusative": "у",
            "instrumental": "ой",
            "prepositional": "е",
        },
    },
    "fem_ya": {
        "name": "Feminine -я",
        "strip": 1,
        "endings": {
            "genitive": "и",
            "dative": "е",
            "accusative": "ю",
            "instrumental": "ей",
            "prepositional": "е",
        },
    },
    "fem_soft": {
        "name": "Feminine -ь",
        "strip": 1,
        "endings": {
            "genitive": "и",
            "dative": "и",
            "accusative": None,
            "instrumental": "ью",
            "prepositional": "и",
        },
    },
    "neut_o": {
        "name": "Neuter -о",
        "strip": 1,
        "endings": {
            "genitive": "а",
            "dative": "у",
            "accusative": None,
            "instrumental": "ом",
            "prepositional": "е",
        },
    },
    "neut_e": {
        "name": "Neuter -е/-ё",
        "strip": 1,
        "endings": {
            "genitive": "я",
            "dative": "ю",
            "accusative": None,
            "instrumental": "ем",
            "prepositional": "е",
        },
    },
}


def infer_gender(word: str) -> Gender:
    """Guess grammatical gender from the word ending, defaulting to masculine."""
    w = word.strip().lower()
    if w.endswith("мя") or w.endswith(("о", "е", "ё")):
        return "neuter"
    if w.endswith(("а", "я", "ь")):
        return "feminine"
    return "masculine"


def select_pattern(word: str, gender: Gender) -> str | None:
    """Pick the paradigm key for word, or None when no rule applies."""
    w = word.lower()
    if not w:
        return None
    last = w[-1]

    match gender:
        case "masculine":
            if last in "ьй":
                return "masc_soft"
            if last not in HARD_MASCULINE_EXCLUDED:
                return "masc_hard"
        case "feminine":
            if last == "а":
                return "fem_a"
            if last == "я":
                return "fem_ya"
            if last == "ь":
                return "fem_soft"
        case "neuter":
            if last == "о":
                return "neut_o"
            if last in "её":
                return "neut_e"
    return None


def generate_declension(
    word: str,
    gender: Gender | None = None,
    animacy: Animacy | None = None,
) -> Declension:
    """Build a best-effort declension by suffix substitution.

    Every slot starts as the dictionary form; the matching paradigm, if any,
    overwrites the five oblique singular cases. Animate masculines take the
    genitive form in the accusative.
    """
    word = word.strip() if isinstance(word, str) else ""
    resolved_gender = gender or infer_gender(word)
    resolved_animacy = animacy or "inanimate"

    declension = Declension.seeded(
        word,
        gender=resolved_gender,
        animacy=resolved_animacy,
        origin="rules",
        is_fallback=True,
    )

    key = select_pattern(word, resolved_gender)
    if key is None:
        return declension

    pattern = DECLENSION_PATTERNS[key]
    strip = pattern["strip"]
    stem = word[:-strip] if strip else word
    singular = declension.forms["singular"]

    for case, ending in pattern["endings"].items():
        if ending is None:
            continue
        if ending.startswith("ы") and stem[-1:].lower() in VELARS_AND_SIBILANTS:
            ending = "и" + ending[1:]
        singular[case] = stem + ending

    if resolved_gender == "masculine" and resolved_animacy == "animate":
        singular["accusative"] = singular["genitive"]

    return declension
