"""
Core data types for Founder Finder.

This module defines the records that flow through the batch pipeline:
- Company: One parsed line of the input list
- CompanyResult: Outcome of resolving and extracting one company
- BatchStats: Counters collected over a whole batch run
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Company:
    """A company to look up, parsed from the input list.

    Attributes:
        name: Free-text company name, never empty
        url: Optional homepage URL from the input line; informational only
    """
    name: str
    url: str | None = None

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    def __str__(self) -> str:
        if self.has_url:
            return f"{self.name} ({self.url})"
        return self.name


@dataclass
class CompanyResult:
    """Outcome of processing one company.

    founders is always populated (possibly empty). url is None when no
    article could be resolved. error holds a short description when
    processing raised and the company was recorded as empty.

    Attributes:
        company: The company that was processed
        url: Resolved article URL, or None
        founders: Founder names in first-seen order
        error: Failure description, or None on a clean run
    """
    company: Company
    url: str | None = None
    founders: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def resolved(self) -> bool:
        return self.url is not None


@dataclass
class BatchStats:
    """Statistics collected during a batch run.

    Attributes:
        total: Number of companies in the input
        resolved: Companies resolved to an article
        unresolved: Companies with no usable article
        with_founders: Companies with at least one founder extracted
        failed: Companies whose processing raised
    """
    total: int = 0
    resolved: int = 0
    unresolved: int = 0
    with_founders: int = 0
    failed: int = 0

    def record(self, result: CompanyResult) -> None:
        if result.error is not None:
            self.failed += 1
        elif result.resolved:
            self.resolved += 1
        else:
            self.unresolved += 1
        if result.founders:
            self.with_founders += 1
