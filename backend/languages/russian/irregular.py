"""Hand-verified declensions for nouns the rules and scrapers get wrong.

Covers suppletive plurals (человек/люди, ребёнок/дети), the -мя neuters and
stem-altering feminines. Lookups return copies; the table itself is never
handed out.
"""
from languages.russian.maps import CASES
from languages.russian.paradigm import Declension

SOURCE_PAGE_URL = "https://ru.wiktionary.org/wiki/"

# word -> (gender, animacy, singular forms, plural forms, transliteration, translation, note)
# Forms are listed in case order: nom, gen, dat, acc, ins, prp.
IRREGULAR_NOUNS = {
    "время": (
        "neuter", "inanimate",
        ("время", "времени", "времени", "время", "временем", "времени"),
        ("времена", "времён", "временам", "времена", "временами", "временах"),
        "vremya", "time",
        "Irregular neuter noun with -мя stem",
    ),
    "дочь": (
        "feminine", "animate",
        ("дочь", "дочери", "дочери", "дочь", "дочерью", "дочери"),
        ("дочери", "дочерей", "дочерям", "дочерей", "дочерьми", "дочерях"),
        "doch'", "daughter",
        "Irregular feminine noun with consonant mutation",
    ),
    "мать": (
        "feminine", "animate",
        ("мать", "матери", "матери", "мать", "матерью", "матери"),
        ("матери", "матерей", "матерям", "матерей", "матерями", "матерях"),
        "mat'", "mother",
        "Irregular feminine noun with stem changes",
    ),
    "путь": (
        "masculine", "inanimate",
        ("путь", "пути", "пути", "путь", "путём", "пути"),
        ("пути", "путей", "путям", "пути", "путями", "путях"),
        "put'", "way/path",
        "Irregular masculine noun with mixed declension pattern",
    ),
    "имя": (
        "neuter", "inanimate",
        ("имя", "имени", "имени", "имя", "именем", "имени"),
        ("имена", "имён", "именам", "имена", "именами", "именах"),
        "imya", "name",
        "Irregular neuter noun with -мя stem",
    ),
    "знамя": (
        "neuter", "inanimate",
        ("знамя", "знамени", "знамени", "знамя", "знаменем", "знамени"),
        ("знамёна", "знамён", "знамёнам", "знамёна", "знамёнами", "знамёнах"),
        "znamya", "banner/flag",
        "Irregular neuter noun with -мя stem",
    ),
    "человек": (
        "masculine", "animate",
        ("человек", "человека", "человеку", "человека", "человеком", "человеке"),
        ("люди", "людей", "людям", "людей", "людьми", "людях"),
        "chelovek", "person",
        "Highly irregular - uses suppletive plural (люди)",
    ),
    "ребёнок": (
        "masculine", "animate",
        ("ребёнок", "ребёнка", "ребёнку", "ребёнка", "ребёнком", "ребёнке"),
        ("дети", "детей", "детям", "детей", "детьми", "детях"),
        "rebyonok", "child",
        "Highly irregular - uses suppletive plural (дети)",
    ),
}


def has_irregular_data(word: str) -> bool:
    return word in IRREGULAR_NOUNS


def irregular_words() -> list[str]:
    return list(IRREGULAR_NOUNS)


def get_irregular_declension(word: str) -> Declension | None:
    """Return a fresh Declension for an irregular noun, or None."""
    entry = IRREGULAR_NOUNS.get(word)
    if entry is None:
        return None

    gender, animacy, singular, plural, transliteration, translation, note = entry
    return Declension(
        word=word,
        gender=gender,
        animacy=animacy,
        forms={
            "singular": dict(zip(CASES, singular)),
            "plural": dict(zip(CASES, plural)),
        },
        translation=translation,
        transliteration=transliteration,
        source_url=f"{SOURCE_PAGE_URL}{word}",
        origin="irregular",
        irregular=True,
        note=note,
    )
