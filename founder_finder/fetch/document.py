"""
Read-only HTML document tree.

The resolver and the extractor only see the Document and Element
interfaces defined here, so the HTML parser behind them can be swapped
without touching pipeline logic. The default implementation wraps
BeautifulSoup with the stdlib "html.parser" backend; CSS selectors are
evaluated by soupsieve.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup
from bs4.element import Tag


class Element(ABC):
    """A single element of a parsed document."""

    @abstractmethod
    def select(self, selector: str) -> list[Element]:
        """Return all descendants matching a CSS selector, in document order."""
        raise NotImplementedError

    def select_first(self, selector: str) -> Element | None:
        """Return the first descendant matching a CSS selector, or None."""
        matches = self.select(selector)
        return matches[0] if matches else None

    @abstractmethod
    def attr(self, name: str) -> str:
        """Return an attribute value, or an empty string when absent."""
        raise NotImplementedError

    @abstractmethod
    def inner_html(self) -> str:
        """Return the markup of the element's children."""
        raise NotImplementedError

    @abstractmethod
    def text(self) -> str:
        """Return visible text with whitespace runs collapsed and trimmed."""
        raise NotImplementedError


class Document(ABC):
    """A parsed HTML page.

    Attributes:
        url: Final URL of the page after redirects
    """

    url: str

    @abstractmethod
    def select(self, selector: str) -> list[Element]:
        raise NotImplementedError

    def select_first(self, selector: str) -> Element | None:
        matches = self.select(selector)
        return matches[0] if matches else None

    @property
    @abstractmethod
    def title(self) -> str:
        """Return the page <title> text, or an empty string."""
        raise NotImplementedError


class SoupElement(Element):
    def __init__(self, tag: Tag):
        self._tag = tag

    def select(self, selector: str) -> list[Element]:
        return [SoupElement(tag) for tag in self._tag.select(selector)]

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def inner_html(self) -> str:
        return self._tag.decode_contents()

    def text(self) -> str:
        return " ".join(self._tag.get_text().split())


class SoupDocument(Document):
    def __init__(self, soup: BeautifulSoup, url: str):
        self._soup = soup
        self.url = url

    def select(self, selector: str) -> list[Element]:
        return [SoupElement(tag) for tag in self._soup.select(selector)]

    @property
    def title(self) -> str:
        if self._soup.title is None:
            return ""
        return " ".join(self._soup.title.get_text().split())


def parse_html(html: str, url: str) -> Document:
    """Parse an HTML string into a Document.

    Args:
        html: The page markup
        url: The URL the markup was fetched from

    Returns:
        A read-only Document

    Raises:
        ValueError: If the markup is empty
    """
    if not html or not html.strip():
        raise ValueError(f"Empty response body from {url}")
    return SoupDocument(BeautifulSoup(html, "html.parser"), url)
