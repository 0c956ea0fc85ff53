"""
Founder extraction.

This package finds the founder row of an article's infobox and turns
its cell into clean person names.
"""

from .founders import FOUNDER_HEADERS, extract_founders, find_founder_cell
from .names import extract_names, is_valid_person_name, normalize_name, split_cell_markup

__all__ = [
    "FOUNDER_HEADERS",
    "extract_founders",
    "extract_names",
    "find_founder_cell",
    "is_valid_person_name",
    "normalize_name",
    "split_cell_markup",
]
