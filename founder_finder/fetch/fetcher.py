"""
HTTP page fetching with bounded retries.

Every request goes through FetchClient, which issues plain GET requests
with httpx, follows redirects, retries failures with exponential backoff
and parses successful responses into a Document. All delays are routed
through a Sleeper so they can be simulated in tests and cancelled on
shutdown.
"""

from __future__ import annotations

import logging

import httpx

from ..config import FetchConfig, get_user_agent
from ..core.clock import Sleeper
from ..errors import FetchError, Interrupted
from ..logging_utils import log_event
from .document import Document, parse_html


logger = logging.getLogger(__name__)


class FetchClient:
    """Fetch pages as parsed Documents, retrying transient failures.

    A failed attempt is any transport error, timeout, non-2xx status or
    unparsable body. Between failed attempts the client waits
    backoff_base_seconds * 2 ** (attempt - 1). After a success it waits
    pacing_seconds when more attempts were still available, to keep the
    request rate low across the several fetches of one resolution.

    Attributes:
        cfg: Fetch configuration (attempts, timeout, backoff, pacing)
        sleeper: Cancellable delay used for backoff and pacing
    """

    def __init__(
        self,
        cfg: FetchConfig,
        sleeper: Sleeper | None = None,
        client: httpx.Client | None = None,
    ):
        self.cfg = cfg
        self.sleeper = sleeper or Sleeper()
        self.user_agent = get_user_agent(cfg)
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=cfg.timeout_seconds,
            follow_redirects=True,
            trust_env=cfg.trust_env,
        )

    def __enter__(self) -> FetchClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch(self, url: str) -> Document:
        """Fetch a URL and parse it into a Document.

        Args:
            url: Absolute URL to fetch

        Returns:
            The parsed Document of the final (post-redirect) response

        Raises:
            FetchError: If every attempt failed or a wait was interrupted
        """
        max_attempts = max(1, self.cfg.max_attempts)
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            log_event(
                logger,
                f"Fetching {url} (attempt {attempt})",
                level=logging.DEBUG,
                event="fetch_attempt",
                url=url,
                attempt=attempt,
            )
            try:
                resp = self._client.get(url, headers={"User-Agent": self.user_agent})
                resp.raise_for_status()
                document = parse_html(resp.text, str(resp.url))
            except (httpx.HTTPError, ValueError) as exc:
                last_error = exc
                log_event(
                    logger,
                    f"Attempt {attempt} failed for {url}: {type(exc).__name__}: {exc}",
                    level=logging.WARNING,
                    event="fetch_failed",
                    url=url,
                    attempt=attempt,
                    error=f"{type(exc).__name__}: {exc}",
                )
                if attempt < max_attempts:
                    delay = self.cfg.backoff_base_seconds * 2 ** (attempt - 1)
                    log_event(
                        logger,
                        f"Retrying {url} in {delay:.2f}s",
                        level=logging.DEBUG,
                        event="fetch_backoff",
                        url=url,
                        attempt=attempt,
                        delay=delay,
                    )
                    self._wait(url, delay, exc)
                continue

            if attempt < max_attempts:
                self._wait(url, self.cfg.pacing_seconds, None)
            return document

        raise FetchError(url, last_error)

    def _wait(self, url: str, seconds: float, last_error: Exception | None) -> None:
        try:
            self.sleeper.sleep(seconds)
        except Interrupted as exc:
            log_event(
                logger,
                f"Fetch of {url} interrupted",
                level=logging.WARNING,
                event="fetch_interrupted",
                url=url,
                error=str(last_error) if last_error else None,
            )
            raise FetchError(url, exc, interrupted=True) from exc
