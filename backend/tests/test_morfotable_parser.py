"""
Tests for Russian Wiktionary declension-table parsing
"""

import pytest

from core.errors import ErrorCode
from ingest.parsers.morfotable import (
    MorfotableParser,
    infer_animacy_from_html,
    infer_gender_from_html,
)
from ingest.parsers.sanitize import clean_text
from languages.russian.validation import is_valid_declension


@pytest.fixture
def parser():
    return MorfotableParser()


def table(rows, css_class="morfotable ru"):
    body = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    return f'<table class="{css_class}"><tbody>{body}</tbody></table>'


STOL_ROWS = table([
    ["Им.", "стол", "столы"],
    ["Р.", "стола", "столов"],
    ["Д.", "столу", "столам"],
    ["В.", "стол", "столы"],
    ["Тв.", "столом", "столами"],
    ["Пр.", "столе", "столах"],
])


class TestTableParsing:

    def test_full_table(self, parser, stol_html):
        d = parser.parse_html("стол", stol_html)

        assert d is not None
        assert d.origin == "primary"
        assert d.from_primary_source
        assert d.gender == "masculine"
        assert d.animacy == "inanimate"
        assert d.source_url == "https://ru.wiktionary.org/wiki/%D1%81%D1%82%D0%BE%D0%BB"
        assert d.forms["singular"] == {
            "nominative": "стол",
            "genitive": "стола",
            "dative": "столу",
            "accusative": "стол",
            "instrumental": "столом",
            "prepositional": "столе",
        }
        assert d.forms["plural"]["genitive"] == "столов"
        assert d.forms["plural"]["prepositional"] == "столах"
        assert is_valid_declension(d)

    def test_forms_survive_second_cleaning(self, parser, stol_html):
        d = parser.parse_html("стол", stol_html)
        for form in d.present_forms():
            assert clean_text(form) == form

    def test_variants_keep_first(self, parser):
        html = table([
            ["Им.", "глаз", "глаза́ // гла́зы"],
            ["Р.", "глаза", "глаз"],
            ["Д.", "глазу", "глазам"],
            ["В.", "глаз", "глаза"],
        ])
        d = parser.parse_html("глаз", html)
        assert d.forms["plural"]["nominative"] == "глаза"

    def test_dash_cells_are_absent(self, parser):
        html = table([
            ["Им.", "ножницы", "ножницы"],
            ["Р.", "—", "ножниц"],
            ["Д.", "-", "ножницам"],
            ["В.", "ножницы", "ножницы"],
            ["Тв.", "ножницами", "ножницами"],
            ["Пр.", "ножницах", "ножницах"],
        ])
        d = parser.parse_html("ножницы", html)
        assert d.forms["singular"]["genitive"] == "-"
        assert d.forms["singular"]["dative"] == "-"
        assert d.form("genitive") is None
        assert d.forms["plural"]["genitive"] == "ножниц"

    def test_labels_match_whole_cell_only(self, parser):
        html = table([
            ["Им.", "дом", "дома"],
            ["Р.", "дома", "домов"],
            ["Д.", "дому", "домам"],
            ["Д. ед.", "не-дательный", "не-дательный"],
            ["В.", "дом", "дома"],
        ])
        d = parser.parse_html("дом", html)
        assert d.forms["singular"]["dative"] == "дому"
        assert "не-дательный" not in d.present_forms()

    def test_header_rows_skipped(self, parser):
        html = (
            '<table class="morfotable ru"><thead><tr><th>падеж</th><th>ед. ч.</th><th>мн. ч.</th></tr></thead>'
            "<tr><th>Им.</th><td>дом</td><td>дома</td></tr>"
            "<tr><th>Р.</th><td>дома</td><td>домов</td></tr>"
            "<tr><th>Д.</th><td>дому</td><td>домам</td></tr>"
            "<tr><th>В.</th><td>дом</td><td>дома</td></tr>"
            "</table>"
        )
        d = parser.parse_html("дом", html)
        assert d is not None
        assert d.forms["singular"]["accusative"] == "дом"

    def test_inflection_class_fallback(self, parser):
        html = table([
            ["Им.", "дом", "дома"],
            ["Р.", "дома", "домов"],
            ["Д.", "дому", "домам"],
            ["В.", "дом", "дома"],
        ], css_class="wikitable inflection-table")
        d = parser.parse_html("дом", html)
        assert d is not None
        assert d.forms["plural"]["dative"] == "домам"

    @pytest.mark.parametrize("opening", [
        '<table class="ru morfotable">',
        "<table class='morfotable ru'>",
        '<table id="decl" class="wikitable morfotable ru" style="float:right">',
    ], ids=["reordered", "single-quoted", "extra-attributes"])
    def test_table_class_variants(self, parser, opening):
        rows = STOL_ROWS.replace('<table class="morfotable ru">', opening)
        d = parser.parse_html("стол", rows)
        assert d is not None
        assert d.forms["singular"]["dative"] == "столу"
        assert d.forms["plural"]["genitive"] == "столов"

    def test_nested_table_in_cell_is_ignored(self, parser):
        nested = '<table class="note"><tr><td>Р.</td><td>ложная</td><td>ложные</td></tr></table>'
        html = STOL_ROWS.replace("<td>Им.</td>", f"<td>Им.{nested}</td>")
        d = parser.parse_html("стол", html)

        assert d is not None
        assert d.forms["singular"]["nominative"] == "стол"
        assert d.forms["singular"]["genitive"] == "стола"
        assert "ложная" not in d.present_forms()

    def test_sparse_table_rejected(self, parser):
        html = table([["Им.", "дом", "дома"], ["Р.", "дома", "домов"]])
        assert parser.parse_html("дом", html) is None


class TestInlineFallback:

    def test_inline_phrases(self, parser):
        html = "<p>род. п. ед. ч. — дома; дат. п. ед. ч. — дому; твор. п. ед. ч. — домом</p>"
        d = parser.parse_html("дом", html)

        assert d is not None
        assert d.forms["singular"]["nominative"] == "дом"
        assert d.forms["singular"]["genitive"] == "дома"
        assert d.forms["singular"]["dative"] == "дому"
        assert d.forms["singular"]["instrumental"] == "домом"
        assert d.forms["singular"]["accusative"] == "-"
        assert set(d.forms["plural"].values()) == {"-"}

    def test_single_inline_match_is_not_enough(self, parser):
        html = "<p>родительный п. ед. ч. - дома</p>"
        assert parser.parse_html("дом", html) is None


class TestMarkers:

    @pytest.mark.parametrize("html,expected", [
        ("<i>муж. р.</i>", "masculine"),
        ("<i>жен.</i>", "feminine"),
        ("<i>ср. р.</i>", "neuter"),
        ("<span>masculine</span>", "masculine"),
        ("<p>ничего</p>", None),
    ])
    def test_gender(self, html, expected):
        assert infer_gender_from_html(html) == expected

    @pytest.mark.parametrize("html,expected", [
        ("<i>одуш.</i>", "animate"),
        ("<i>неодуш.</i>", "inanimate"),
        ("<p>ничего</p>", "inanimate"),
    ])
    def test_animacy(self, html, expected):
        assert infer_animacy_from_html(html) == expected


class TestParseResult:

    def test_empty_body(self, parser):
        result = parser.parse("дом", "")
        assert result.unwrap_err().code == ErrorCode.E7001_MARKUP_NOT_FOUND

    def test_no_table(self, parser):
        result = parser.parse("дом", "<html><body><p>Статья отсутствует</p></body></html>")
        assert result.is_err()
        assert result.unwrap_err().code == ErrorCode.E7001_MARKUP_NOT_FOUND

    def test_ok(self, parser, stol_html):
        result = parser.parse("стол", stol_html)
        assert result.is_ok()
        assert result.unwrap().forms["singular"]["genitive"] == "стола"
