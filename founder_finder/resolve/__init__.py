"""
Article resolution.

This package turns a free-text company name into a single article URL.
"""

from .resolver import (
    PageResolver,
    build_direct_url,
    build_search_url,
    first_article_link,
    is_valid_article,
)

__all__ = [
    "PageResolver",
    "build_direct_url",
    "build_search_url",
    "first_article_link",
    "is_valid_article",
]
