"""
Founder extraction from Wikipedia infoboxes.

The first infobox table of an article is scanned row by row; the first
row whose header is exactly one of FOUNDER_HEADERS provides the data
cell that is turned into founder names.
"""

from __future__ import annotations

import logging

from ..fetch.document import Document, Element
from ..logging_utils import log_event
from .names import extract_names


logger = logging.getLogger(__name__)

FOUNDER_HEADERS = ("Founder(s)", "Founders", "Founder")


def is_founder_header(header_text: str) -> bool:
    return header_text.strip() in FOUNDER_HEADERS


def find_founder_cell(document: Document) -> Element | None:
    """Locate the data cell of the first founder row in the first infobox.

    Rows without both a header cell and a data cell are skipped. When a
    row has several of either, only the first is considered.

    Args:
        document: The article page

    Returns:
        The founder data cell, or None if there is no infobox or no founder row
    """
    infobox = document.select_first("table.infobox")
    if infobox is None:
        log_event(
            logger,
            "No infobox found",
            level=logging.DEBUG,
            event="infobox_missing",
            url=document.url,
        )
        return None

    for row in infobox.select("tr"):
        header = row.select_first("th")
        cell = row.select_first("td")
        if header is None or cell is None:
            continue
        if is_founder_header(header.text()):
            return cell

    log_event(
        logger,
        "No founder row in infobox",
        level=logging.DEBUG,
        event="founder_row_missing",
        url=document.url,
    )
    return None


def extract_founders(document: Document) -> list[str]:
    """Extract normalized founder names from an article's infobox.

    Args:
        document: The article page

    Returns:
        Founder names in first-seen order, without duplicates. Empty when the
        page has no infobox, no founder row, or no cell fragment passes the
        person-name rules.
    """
    cell = find_founder_cell(document)
    if cell is None:
        return []

    founders = extract_names(cell.inner_html())
    log_event(
        logger,
        f"Extracted {len(founders)} founders: {founders}",
        level=logging.DEBUG,
        event="founders_extracted",
        url=document.url,
        count=len(founders),
    )
    return founders
