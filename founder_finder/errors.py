"""Exception types raised by the fetch and orchestration layers."""

from __future__ import annotations


class FounderFinderError(Exception):
    """Base class for all errors raised by this package."""


class Interrupted(FounderFinderError):
    """A cancellable wait was aborted by a shutdown request."""


class FetchError(FounderFinderError):
    """All attempts to fetch a URL failed, or the attempt chain was interrupted.

    Attributes:
        url: The URL that could not be fetched
        cause: The last underlying failure
        interrupted: True when the chain was aborted by a cancelled wait
    """

    def __init__(self, url: str, cause: BaseException | None, interrupted: bool = False):
        self.url = url
        self.cause = cause
        self.interrupted = interrupted
        if interrupted:
            message = f"Interrupted while fetching {url}"
        else:
            message = f"Failed to fetch {url}"
        if cause is not None:
            message = f"{message}: {type(cause).__name__}: {cause}"
        super().__init__(message)
