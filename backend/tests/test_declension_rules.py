"""
Tests for rule-based singular declension and gender inference
"""

import pytest

from languages.russian.declension import generate_declension, infer_gender, select_pattern
from languages.russian.maps import CASES
from languages.russian.validation import is_valid_declension


class TestInferGender:

    @pytest.mark.parametrize("word,expected", [
        ("стол", "masculine"),
        ("музей", "masculine"),
        ("книга", "feminine"),
        ("неделя", "feminine"),
        ("ночь", "feminine"),
        ("окно", "neuter"),
        ("море", "neuter"),
        ("время", "neuter"),
        ("xyz", "masculine"),
    ])
    def test_endings(self, word, expected):
        assert infer_gender(word) == expected


class TestGenerateDeclension:

    def test_masculine_hard_inanimate(self):
        d = generate_declension("стол", "masculine", "inanimate")
        s = d.forms["singular"]
        assert s["nominative"] == "стол"
        assert s["genitive"] == "стола"
        assert s["dative"] == "столу"
        assert s["accusative"] == "стол"
        assert s["instrumental"] == "столом"
        assert s["prepositional"] == "столе"

    def test_masculine_animate_accusative_is_genitive(self):
        d = generate_declension("студент", "masculine", "animate")
        assert d.forms["singular"]["accusative"] == "студента"

    def test_masculine_soft(self):
        s = generate_declension("музей").forms["singular"]
        assert s["genitive"] == "музея"
        assert s["dative"] == "музею"
        assert s["accusative"] == "музей"
        assert s["instrumental"] == "музеем"
        assert s["prepositional"] == "музее"

        animate = generate_declension("конь", "masculine", "animate").forms["singular"]
        assert animate["accusative"] == "коня"

    def test_feminine_a(self):
        s = generate_declension("книга", "feminine").forms["singular"]
        assert s["genitive"] == "книги"
        assert s["dative"] == "книге"
        assert s["accusative"] == "книгу"
        assert s["instrumental"] == "книгой"

    def test_feminine_ya(self):
        s = generate_declension("неделя").forms["singular"]
        assert [s[c] for c in CASES] == ["неделя", "недели", "неделе", "неделю", "неделей", "неделе"]

    def test_feminine_soft_sign(self):
        s = generate_declension("ночь", "feminine").forms["singular"]
        assert [s[c] for c in CASES] == ["ночь", "ночи", "ночи", "ночь", "ночью", "ночи"]

    def test_neuter_o(self):
        s = generate_declension("окно").forms["singular"]
        assert [s[c] for c in CASES] == ["окно", "окна", "окну", "окно", "окном", "окне"]

    def test_neuter_e(self):
        s = generate_declension("море").forms["singular"]
        assert [s[c] for c in CASES] == ["море", "моря", "морю", "море", "морем", "море"]

    def test_plural_left_as_dictionary_form(self):
        d = generate_declension("стол")
        assert set(d.forms["plural"].values()) == {"стол"}

    def test_marked_as_rule_fallback(self):
        d = generate_declension("стол")
        assert d.origin == "rules"
        assert d.is_fallback is True
        assert d.animacy == "inanimate"

    def test_no_matching_rule_keeps_seed(self):
        d = generate_declension("стол", "feminine")
        assert select_pattern("стол", "feminine") is None
        assert set(d.forms["singular"].values()) == {"стол"}
        assert not is_valid_declension(d)

    def test_empty_word(self):
        d = generate_declension("")
        assert len(d.forms["singular"]) == 6
        assert not is_valid_declension(d)

    def test_regular_output_passes_validation(self):
        assert is_valid_declension(generate_declension("стол"))
