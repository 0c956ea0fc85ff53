"""Tests for founder-cell splitting, name normalization and validation."""

import pytest

from founder_finder.extract.names import (
    extract_names,
    is_valid_person_name,
    normalize_name,
    split_cell_markup,
)


def test_split_cell_markup_treats_br_as_separator():
    markup = '<a href="/wiki/Jane_Doe" title="Jane Doe">Jane Doe</a><br/>John Smith<BR>Ann Lee'

    assert split_cell_markup(markup) == ["Jane Doe", "John Smith", "Ann Lee"]


def test_split_cell_markup_treats_br_with_attributes_as_separator():
    markup = 'Jane Doe<br clear="all"/>John Smith<br class="x">Ann Lee'

    assert split_cell_markup(markup) == ["Jane Doe", "John Smith", "Ann Lee"]


def test_split_cell_markup_splits_on_commas_semicolons_and_newlines():
    assert split_cell_markup("Jane Doe, John Smith;Ann Lee\n\nBob Ray") == [
        "Jane Doe",
        "John Smith",
        "Ann Lee",
        "Bob Ray",
    ]


def test_split_cell_markup_drops_citations_and_unescapes_entities():
    markup = (
        'Jane&nbsp;Doe<sup id="cite_ref-1" class="reference"><a href="#cite_note-1">[1]</a></sup>'
        "<br />Tom &amp; Co"
    )

    assert split_cell_markup(markup) == ["Jane\xa0Doe", "Tom & Co"]


def test_normalize_strips_honorific_and_suffix():
    assert normalize_name("Dr. Jane Doe") == "Jane Doe"
    assert normalize_name("John Smith Jr.") == "John Smith"
    assert normalize_name("Mrs Ann Lee Sr") == "Ann Lee"
    assert normalize_name("Bob Ray III") == "Bob Ray"


def test_normalize_collapses_whitespace_and_maps_punctuation():
    assert normalize_name("  Jane \t  Doe\xa0 ") == "Jane Doe"
    assert normalize_name("Sean O’Brien") == "Sean O'Brien"
    assert normalize_name("Mary Smith–Jones") == "Mary Smith-Jones"
    assert normalize_name("Mary Smith—Jones") == "Mary Smith-Jones"


def test_normalize_empty_input():
    assert normalize_name("") == ""
    assert normalize_name("   ") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "Dr. Mr. Jane Doe",
        "John Smith Jr. III",
        "  Ms.   Ann   Lee   Sr.  ",
        "Dr. Jr.",
        "Dr.",
        "O’Neil – Smith",
        "plain text",
        "",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_name(raw)

    assert normalize_name(once) == once


@pytest.mark.parametrize(
    "name",
    ["Jane Doe", "Rosa Dell'Amico", "Mary Smith-Jones", "Jean-Luc Picard", "Anna Maria Della Rosa"],
)
def test_valid_person_names(name):
    assert is_valid_person_name(name)


@pytest.mark.parametrize(
    "name",
    [
        "JANE DOE",
        "jane",
        "Jane",
        "Jane Doe Ann Lee Bob",
        "Acme Ventures",
        "Smith Holdings",
        "Vincent Smith",
        "",
    ],
)
def test_invalid_person_names(name):
    assert not is_valid_person_name(name)


def test_extract_names_dedups_and_keeps_first_seen_order():
    assert extract_names("Jane Doe, John Smith; Jane Doe") == ["Jane Doe", "John Smith"]


def test_extract_names_filters_organizations_and_normalizes():
    markup = "Dr. Jane Doe<br/>Acme Ventures<br/>John Smith Jr.<br/>Globex Corporation"

    assert extract_names(markup) == ["Jane Doe", "John Smith"]


def test_extract_names_returns_empty_when_nothing_survives():
    assert extract_names("Acme Inc.<br/>founded in 1999") == []
