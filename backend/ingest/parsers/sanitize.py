"""Text cleanup for scraped dictionary markup.

clean_text turns a table cell or page fragment into plain display text;
normalize_form/forms_equivalent compare learner answers with scraped forms.
"""
import re

STRESS_MARK = "\u0301"

_SUP_SUB = re.compile(r"<su[bp][^>]*>.*?</su[bp]>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_ENTITY = re.compile(r"&[a-z]+;", re.IGNORECASE)
_REFERENCE = re.compile(r"\[[^\]]+\]")
_INVISIBLE = re.compile("[\u0301\u200b-\u200d\ufeff]")
_FOOTNOTE = re.compile(r"[△*†‡§]")
_WHITESPACE = re.compile(r"\s+")


def _clean_pass(text: str) -> str:
    text = _SUP_SUB.sub("", text)

    # Repeat until stable so nested or malformed tags cannot survive one pass
    while True:
        stripped = _TAG.sub("", text)
        if len(stripped) == len(text):
            break
        text = stripped

    text = _REFERENCE.sub("", text)
    text = _FOOTNOTE.sub("", text)
    text = text.replace("&nbsp;", " ").replace("&mdash;", "—")
    text = _ENTITY.sub("", text)
    text = _INVISIBLE.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def clean_text(fragment: str | None) -> str:
    """Reduce an HTML fragment to trimmed plain text.

    Never raises. Idempotent: cleaning already clean text returns it unchanged.
    """
    if not fragment:
        return ""

    # A removal can splice a new entity or marker together; every pass
    # only shortens the text, so this stops.
    text = _clean_pass(fragment)
    while True:
        again = _clean_pass(text)
        if again == text:
            return text
        text = again


def normalize_form(text: str | None, ignore_yo: bool = False) -> str:
    """Lower-case, drop stress marks and trim; optionally fold ё into е."""
    if not text:
        return ""
    normalized = text.lower().replace(STRESS_MARK, "").strip()
    if ignore_yo:
        normalized = normalized.replace("ё", "е")
    return normalized


def forms_equivalent(a: str | None, b: str | None, ignore_yo: bool = False) -> bool:
    """True if two forms match ignoring case, stress marks and surrounding space."""
    return normalize_form(a, ignore_yo) == normalize_form(b, ignore_yo)
