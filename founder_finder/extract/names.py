"""
Person-name rules for infobox founder cells.

Everything here is a pure function on strings: splitting a cell's markup
into candidates, normalizing one candidate, and deciding whether a
normalized candidate looks like a person's name.
"""

from __future__ import annotations

import html
import re
from typing import Iterable


# Citation superscripts such as <sup class="reference">[1]</sup>
CITATION_RE = re.compile(r"<sup\b[^>]*\breference\b[^>]*>.*?</sup>", re.IGNORECASE | re.DOTALL)
BR_RE = re.compile(r"<br\b[^>]*>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]+>")
SEPARATOR_RE = re.compile(r"[\n,;]+")

WHITESPACE_RE = re.compile(r"\s+")
APOSTROPHE_RE = re.compile("[’‘‛`]")
DASH_RE = re.compile("[–—]")
HONORIFIC_RE = re.compile(r"^(?:Mr\.?|Mrs\.?|Ms\.?|Dr\.?)\s+")
SUFFIX_RE = re.compile(r"\s+(?:Jr\.?|Sr\.?|III|IV)$")

# 2-4 capitalized tokens; hyphens/apostrophes join further capitalized parts
_TOKEN = r"[A-Z][a-z]+(?:[-'][A-Z][a-z]+)*"
PERSON_NAME_RE = re.compile(rf"{_TOKEN}(?:\s+{_TOKEN}){{1,3}}")

CORPORATE_TERMS = (
    "company",
    "corporation",
    "inc",
    "llc",
    "ltd",
    "group",
    "systems",
    "technologies",
    "software",
    "services",
    "solutions",
    "ventures",
    "capital",
    "partners",
    "associates",
    "holdings",
    "enterprises",
)

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 100


def split_cell_markup(markup: str) -> list[str]:
    """Split a cell's inner markup into raw name candidates.

    Line breaks, commas and semicolons all separate candidates. Tags are
    removed after <br> elements have been turned into newlines, so names
    wrapped in links survive intact.

    Examples:
        >>> split_cell_markup('<a href="/wiki/A">Jane Doe</a><br/>John Smith')
        ['Jane Doe', 'John Smith']
    """
    text = CITATION_RE.sub("", markup)
    text = BR_RE.sub("\n", text)
    text = TAG_RE.sub("", text)
    text = html.unescape(text)
    return [part.strip() for part in SEPARATOR_RE.split(text) if part.strip()]


def normalize_name(name: str) -> str:
    """Normalize spacing, punctuation, honorifics and generational suffixes.

    Honorific and suffix stripping repeats until nothing changes, so the
    function is idempotent: normalize_name(normalize_name(x)) == normalize_name(x).

    Examples:
        >>> normalize_name("  Dr.  Jane   Doe ")
        'Jane Doe'
        >>> normalize_name("John O’Neil Jr.")
        "John O'Neil"
    """
    name = WHITESPACE_RE.sub(" ", name.strip())
    if not name:
        return ""
    name = APOSTROPHE_RE.sub("'", name)
    name = DASH_RE.sub("-", name)

    while True:
        stripped = HONORIFIC_RE.sub("", name)
        stripped = SUFFIX_RE.sub("", stripped).strip()
        if stripped == name:
            return name
        name = stripped


def has_corporate_term(name: str) -> bool:
    lowered = name.lower()
    return any(term in lowered for term in CORPORATE_TERMS)


def is_valid_person_name(name: str) -> bool:
    """Check whether a normalized candidate looks like a person's name.

    A valid name has 2 to 4 capitalized tokens, contains none of the
    CORPORATE_TERMS (case-insensitive substring match) and is between
    MIN_NAME_LENGTH and MAX_NAME_LENGTH characters long.
    """
    if not name or not name.strip():
        return False
    if not PERSON_NAME_RE.fullmatch(name):
        return False
    if has_corporate_term(name):
        return False
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


def unique_in_order(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))


def extract_names(markup: str) -> list[str]:
    """Turn a founder cell's inner markup into deduplicated person names."""
    normalized = (normalize_name(part) for part in split_cell_markup(markup))
    return unique_in_order(name for name in normalized if is_valid_person_name(name))
