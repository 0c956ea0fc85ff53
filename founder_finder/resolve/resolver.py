"""
Company name to Wikipedia article resolution.

Resolution tries a direct article URL built from the name first and
falls back to the wiki's own search page. Search results are trusted as
the site's relevance ranking: the first acceptable hit wins.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote, urlencode

from ..errors import FetchError
from ..fetch.document import Document
from ..fetch.fetcher import FetchClient
from ..logging_utils import log_event


logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")

DISAMBIGUATION_SELECTORS = ("div#disambig", "#disambigbox")
SEARCH_RESULTS_SELECTOR = "div.searchresults"
SEARCH_LINK_SELECTOR = 'div.searchresults a[href^="/wiki/"]'
REJECTED_TITLE_MARKERS = ("Search results", "Wikipedia:", "(disambiguation)", "Special:")


def build_direct_url(company_name: str, base_url: str) -> str:
    """Build the article URL a name would have as an exact page title.

    Examples:
        >>> build_direct_url("Johnson & Johnson", "https://en.wikipedia.org")
        'https://en.wikipedia.org/wiki/Johnson_%26_Johnson'
    """
    slug = WHITESPACE_RE.sub("_", company_name.strip())
    return f"{base_url.rstrip('/')}/wiki/{quote(slug, safe='')}"


def build_search_url(company_name: str, base_url: str) -> str:
    """Build the on-site search URL for a name.

    Examples:
        >>> build_search_url("Johnson & Johnson", "https://en.wikipedia.org")
        'https://en.wikipedia.org/w/index.php?search=Johnson+%26+Johnson'
    """
    return f"{base_url.rstrip('/')}/w/index.php?{urlencode({'search': company_name})}"


def is_valid_article(document: Document) -> bool:
    """Decide whether a directly fetched page is a usable article.

    Disambiguation pages, search result pages and special or project
    pages are rejected. Any other page is accepted, with or without an
    infobox.
    """
    if any(document.select_first(selector) is not None for selector in DISAMBIGUATION_SELECTORS):
        return False
    if document.select_first(SEARCH_RESULTS_SELECTOR) is not None:
        return False
    title = document.title
    return not any(marker in title for marker in REJECTED_TITLE_MARKERS)


def first_article_link(document: Document, base_url: str) -> str | None:
    """Return the absolute URL of the first usable article link in search results.

    Links into other namespaces (anything with a colon, except File:) and
    links titled as disambiguation pages are skipped.
    """
    for link in document.select(SEARCH_LINK_SELECTOR):
        href = link.attr("href")
        title = link.attr("title")
        if ":" in href and "File:" not in href:
            continue
        if "(disambiguation)" in title:
            continue
        return f"{base_url.rstrip('/')}{href}"
    return None


class PageResolver:
    """Resolve company names to article URLs.

    Attributes:
        fetcher: Client used for both the direct and the search request
        base_url: Scheme and host of the wiki
    """

    def __init__(self, fetcher: FetchClient, base_url: str = "https://en.wikipedia.org"):
        self.fetcher = fetcher
        self.base_url = base_url.rstrip("/")

    def resolve(self, company_name: str) -> str | None:
        """Resolve a company name to a single article URL.

        Never raises: fetch failures downgrade to trying the next candidate,
        or to None when no candidate is left.

        Args:
            company_name: Free-text company name

        Returns:
            Absolute article URL, or None if no usable article was found
        """
        try:
            return self._resolve(company_name)
        except Exception as exc:  # noqa: BLE001
            log_event(
                logger,
                f"Error resolving page for '{company_name}': {type(exc).__name__}: {exc}",
                level=logging.ERROR,
                event="resolve_error",
                company=company_name,
                error=f"{type(exc).__name__}: {exc}",
            )
            return None

    def _resolve(self, company_name: str) -> str | None:
        direct_url = build_direct_url(company_name, self.base_url)
        log_event(
            logger,
            f"Trying direct URL for '{company_name}': {direct_url}",
            event="resolve_direct",
            company=company_name,
            url=direct_url,
        )
        try:
            document = self.fetcher.fetch(direct_url)
        except FetchError as exc:
            log_event(
                logger,
                f"Direct URL failed: {exc}",
                event="resolve_direct_failed",
                company=company_name,
                url=direct_url,
                error=str(exc),
            )
            if exc.interrupted:
                return None
        else:
            if is_valid_article(document):
                log_event(
                    logger,
                    f"Direct URL works: {direct_url}",
                    event="resolve_direct_ok",
                    company=company_name,
                    url=direct_url,
                )
                return direct_url
            log_event(
                logger,
                "Direct URL not suitable (disambiguation or search page)",
                event="resolve_direct_rejected",
                company=company_name,
                url=direct_url,
            )

        return self._resolve_via_search(company_name)

    def _resolve_via_search(self, company_name: str) -> str | None:
        search_url = build_search_url(company_name, self.base_url)
        log_event(
            logger,
            f"Trying search for '{company_name}': {search_url}",
            event="resolve_search",
            company=company_name,
            url=search_url,
        )
        try:
            document = self.fetcher.fetch(search_url)
        except FetchError as exc:
            log_event(
                logger,
                f"Search failed for '{company_name}': {exc}",
                level=logging.WARNING,
                event="resolve_search_failed",
                company=company_name,
                url=search_url,
                error=str(exc),
            )
            return None

        article_url = first_article_link(document, self.base_url)
        if article_url is None:
            log_event(
                logger,
                f"No suitable article found in search results for '{company_name}'",
                level=logging.WARNING,
                event="resolve_absent",
                company=company_name,
            )
            return None

        log_event(
            logger,
            f"Found article via search: {article_url}",
            event="resolve_search_ok",
            company=company_name,
            url=article_url,
        )
        return article_url
