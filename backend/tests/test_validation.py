"""
Tests for declension trust checks and display formatting
"""

import pytest

from languages.russian.maps import CASES
from languages.russian.paradigm import Declension, NounMetadata
from languages.russian.validation import (
    MIN_REQUIRED_FORMS,
    format_for_display,
    is_valid_declension,
)


def make_declension(word, singular, plural, **kwargs):
    return Declension(
        word=word,
        forms={
            "singular": dict(zip(CASES, singular)),
            "plural": dict(zip(CASES, plural)),
        },
        **kwargs,
    )


KNIGA = make_declension(
    "книга",
    ["книга", "книги", "книге", "книгу", "книгой", "книге"],
    ["книги", "книг", "книгам", "книги", "книгами", "книгах"],
    gender="feminine",
)
STOL = make_declension(
    "стол",
    ["стол", "стола", "столу", "стол", "столом", "столе"],
    ["столы", "столов", "столам", "столы", "столами", "столах"],
    gender="masculine",
)
OKNO = make_declension(
    "окно",
    ["окно", "окна", "окну", "окно", "окном", "окне"],
    ["окна", "окон", "окнам", "окна", "окнами", "окнах"],
    gender="neuter",
)


class TestIsValidDeclension:

    @pytest.mark.parametrize("declension", [STOL, KNIGA, OKNO], ids=["masculine", "feminine", "neuter"])
    def test_well_formed(self, declension):
        assert is_valid_declension(declension)

    def test_missing_input(self):
        assert not is_valid_declension(None)
        assert not is_valid_declension({})
        assert not is_valid_declension({"forms": {"singular": {"nominative": "стол"}}})

    def test_too_few_forms(self):
        d = make_declension(
            "стол",
            ["стол", "стола", "столу", "стол", "", ""],
            ["столы", "столов", "столам", "", "", ""],
        )
        assert len(d.present_forms()) == MIN_REQUIRED_FORMS - 1
        assert not is_valid_declension(d)

    def test_dashes_do_not_count(self):
        d = make_declension(
            "стол",
            ["стол", "стола", "столу", "стол", "-", "—"],
            ["столы", "столов", "столам", "-", "-", "-"],
        )
        assert not is_valid_declension(d)

    def test_blank_form_rejected(self):
        d = make_declension(
            "стол",
            ["стол", "стола", "столу", "стол", "столом", "  "],
            ["столы", "столов", "столам", "столы", "столами", "столах"],
        )
        assert not is_valid_declension(d)

    def test_all_identical(self):
        d = Declension.seeded("стол")
        assert not is_valid_declension(d)

    def test_uniform_singular(self):
        d = make_declension(
            "стол",
            ["стол"] * 6,
            ["столы", "столов", "столам", "столы", "столами", "столах"],
        )
        assert not is_valid_declension(d)

    def test_singular_equals_plural(self):
        forms = ["a", "b", "c", "d", "e", "f"]
        d = make_declension("a", forms, list(reversed(forms)))
        assert not is_valid_declension(d)

    def test_partial_overlap_allowed(self):
        d = make_declension(
            "имя",
            ["имя", "имени", "имени", "имя", "именем", "имени"],
            ["имена", "имён", "именам", "имена", "именами", "именах"],
        )
        assert is_valid_declension(d)

    def test_plain_mapping_shapes(self):
        as_forms = {"word": "стол", "forms": STOL.forms}
        as_declension = {"word": "стол", "declension": STOL.forms}
        assert is_valid_declension(as_forms)
        assert is_valid_declension(as_declension)

    def test_placeholder_is_invalid(self):
        assert not is_valid_declension(Declension.placeholder("стол"))


class TestFormatForDisplay:

    def test_valid_returned_unchanged(self):
        assert format_for_display(STOL) is STOL

    def test_invalid_becomes_placeholder(self):
        bad = Declension.seeded("стол", gender="masculine", translation="table")
        shown = format_for_display(bad)

        assert shown.is_fallback is True
        assert shown.error == "Declension data unavailable"
        assert shown.origin == "placeholder"
        assert shown.word == "стол"
        assert shown.gender == "masculine"
        assert shown.translation == "table"
        for number in ("singular", "plural"):
            assert list(shown.forms[number].values()) == ["-"] * 6

    def test_none_uses_metadata(self):
        shown = format_for_display(None, NounMetadata(gender="feminine"))
        assert shown.gender == "feminine"
        assert shown.animacy == "inanimate"
        assert shown.is_fallback
