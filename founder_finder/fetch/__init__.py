"""
Page fetching and parsing.

This package handles HTTP fetching with retries and exposes fetched
pages through a read-only document interface.
"""

from .document import Document, Element, parse_html
from .fetcher import FetchClient

__all__ = [
    "Document",
    "Element",
    "FetchClient",
    "parse_html",
]
