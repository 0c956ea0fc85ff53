"""
Parser for plain-text company lists.

One company per line, optionally followed by its homepage in parentheses:

    Stripe (https://stripe.com/)
    Airbnb

Blank lines are ignored. A parenthesized value that is not an http(s)
URL is dropped with a warning and the company is kept without a URL.
"""

from __future__ import annotations

import logging
from pathlib import Path
import re

from ..core.types import Company
from ..logging_utils import log_event


logger = logging.getLogger(__name__)

COMPANY_RE = re.compile(r"^(.+?)\s*\(([^)]+)\)\s*$")  # Matches "Name (URL)"


def parse_company_file(path: Path | str) -> list[Company]:
    """Parse a company list file.

    Args:
        path: Path to the UTF-8 text file

    Returns:
        Companies in file order

    Raises:
        OSError: If the file cannot be read
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_company_lines(text.splitlines())


def parse_company_lines(lines: list[str]) -> list[Company]:
    companies: list[Company] = []
    for line_number, line in enumerate(lines, start=1):
        company = parse_company_line(line, line_number)
        if company is not None:
            companies.append(company)
    return companies


def parse_company_line(line: str, line_number: int = 0) -> Company | None:
    """Parse a single line into a Company.

    Args:
        line: Raw line from the input file
        line_number: 1-based line number, used in warnings

    Returns:
        A Company, or None for a blank line

    Examples:
        >>> parse_company_line("Stripe (https://stripe.com/)")
        Company(name='Stripe', url='https://stripe.com/')
        >>> parse_company_line("Airbnb")
        Company(name='Airbnb', url=None)
    """
    line = line.strip()
    if not line:
        return None

    match = COMPANY_RE.match(line)
    if not match:
        return Company(name=line)

    name, url = match.group(1).strip(), match.group(2).strip()
    if _is_valid_url(url):
        return Company(name=name, url=url)

    log_event(
        logger,
        f"Invalid URL format on line {line_number}: {url}",
        level=logging.WARNING,
        event="input_invalid_url",
        line=line_number,
        url=url,
    )
    return Company(name=name)


def _is_valid_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")
