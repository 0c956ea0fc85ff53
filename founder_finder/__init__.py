"""
Founder Finder - resolve companies to Wikipedia articles and extract founders.

This package reads a plain-text list of companies, resolves each one to a
Wikipedia article (direct URL first, on-site search as fallback), reads the
article's infobox and writes a JSON mapping of company name to founders.

Main entry point is the CLI via the `founder-finder` command.

Example:
    $ founder-finder companies.txt founders.json
"""

__all__ = [
    "__version__",
    "FetchClient",
    "PageResolver",
    "extract_founders",
    "parse_company_file",
]
__version__ = "0.1.0"

from .extract.founders import extract_founders
from .fetch.fetcher import FetchClient
from .input.company_parser import parse_company_file
from .resolve.resolver import PageResolver
