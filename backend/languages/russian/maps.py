"""Russian case/number/gender label mappings used by the parsers."""
import re

# Russian grammatical cases (ordered)
CASES = ["nominative", "genitive", "dative", "accusative", "instrumental", "prepositional"]
NUMBERS = ["singular", "plural"]
GENDERS = ["masculine", "feminine", "neuter"]
ANIMACIES = ["animate", "inanimate"]

# Placeholder written into every slot of an unusable declension
PLACEHOLDER = "-"
# Cell values that mean "no form" in scraped tables
EMPTY_MARKERS = frozenset({"", "-", "—", "–"})

# English Wiktionary template parameter codes
WIKI_CASE_MAP = {
    "nom": "nominative",
    "gen": "genitive",
    "dat": "dative",
    "acc": "accusative",
    "ins": "instrumental",
    "prp": "prepositional",
}
WIKI_NUMBER_MAP = {"sg": "singular", "pl": "plural"}

# Russian Wiktionary morfotable row labels; whole-label matches only, so
# "Д." never matches inside another label
TABLE_CASE_PATTERNS = {
    "nominative": re.compile(r"^Им\.?$", re.IGNORECASE),
    "genitive": re.compile(r"^Р\.?$", re.IGNORECASE),
    "dative": re.compile(r"^Д\.?$", re.IGNORECASE),
    "accusative": re.compile(r"^В\.?$", re.IGNORECASE),
    "instrumental": re.compile(r"^Тв\.?$", re.IGNORECASE),
    "prepositional": re.compile(r"^Пр\.?$", re.IGNORECASE),
}

# Inline phrases such as "род. п. ед. ч. — стола" (singular only)
INLINE_CASE_PATTERNS = {
    "genitive": re.compile(r"род(?:ительный)?\.?\s*п\.?\s*ед\.?\s*ч\.?\s*[—-]\s*([а-яё]+)", re.IGNORECASE),
    "dative": re.compile(r"дат(?:ельный)?\.?\s*п\.?\s*ед\.?\s*ч\.?\s*[—-]\s*([а-яё]+)", re.IGNORECASE),
    "accusative": re.compile(r"вин(?:ительный)?\.?\s*п\.?\s*ед\.?\s*ч\.?\s*[—-]\s*([а-яё]+)", re.IGNORECASE),
    "instrumental": re.compile(r"твор(?:ительный)?\.?\s*п\.?\s*ед\.?\s*ч\.?\s*[—-]\s*([а-яё]+)", re.IGNORECASE),
    "prepositional": re.compile(r"предл(?:ожный)?\.?\s*п\.?\s*ед\.?\s*ч\.?\s*[—-]\s*([а-яё]+)", re.IGNORECASE),
}

# Gender markers; checked in this order, first match wins
WIKI_GENDER_PATTERNS = [
    ("masculine", re.compile(r"\|g=m\b|\|m\b|\bmasculine\b", re.IGNORECASE)),
    ("feminine", re.compile(r"\|g=f\b|\|f\b|\bfeminine\b", re.IGNORECASE)),
    ("neuter", re.compile(r"\|g=n\b|\|n\b|\bneuter\b", re.IGNORECASE)),
]
HTML_GENDER_PATTERNS = [
    ("masculine", re.compile(r"муж\.?(?:\s+род)?|\bmasculine\b", re.IGNORECASE)),
    ("feminine", re.compile(r"жен\.?(?:\s+род)?|\bfeminine\b", re.IGNORECASE)),
    ("neuter", re.compile(r"ср\.?(?:\s+род)?|\bneuter\b", re.IGNORECASE)),
]

# Animacy markers; inanimate first since "неодуш" contains "одуш"
WIKI_ANIMACY_PATTERNS = [
    ("inanimate", re.compile(r"\|a=in\b|\binanimate\b", re.IGNORECASE)),
    ("animate", re.compile(r"\|a=an\b|\banimate\b", re.IGNORECASE)),
]
HTML_ANIMACY_PATTERNS = [
    ("inanimate", re.compile(r"неодуш\.?|\binanimate\b", re.IGNORECASE)),
    ("animate", re.compile(r"(?<!не)одуш\.?|\banimate\b", re.IGNORECASE)),
]
