"""Tests for FetchClient retry, backoff and pacing behavior."""

import httpx
import pytest

from founder_finder.config import FetchConfig
from founder_finder.core.clock import Sleeper
from founder_finder.errors import FetchError, Interrupted
from founder_finder.fetch.fetcher import FetchClient


PAGE = "<html><head><title>Acme - Wikipedia</title></head><body><p>ok</p></body></html>"
URL = "https://en.wikipedia.org/wiki/Acme"


class _RecordingSleeper(Sleeper):
    """Sleeper that records delays instead of waiting."""

    def __init__(self, interrupt_on: int | None = None):
        super().__init__()
        self.delays: list[float] = []
        self._interrupt_on = interrupt_on

    def sleep(self, seconds: float) -> None:
        self.delays.append(seconds)
        if self._interrupt_on is not None and len(self.delays) == self._interrupt_on:
            self.cancel()
            raise Interrupted("test interrupt")


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)


def test_success_on_first_attempt_waits_pacing_delay():
    sleeper = _RecordingSleeper()
    client = _client(lambda r: httpx.Response(200, text=PAGE))
    fetcher = FetchClient(FetchConfig(), sleeper=sleeper, client=client)

    document = fetcher.fetch(URL)

    assert document.title == "Acme - Wikipedia"
    assert sleeper.delays == [0.35]


def test_fails_twice_then_succeeds_with_increasing_backoff():
    calls = 0
    sleeper = _RecordingSleeper()

    def handler(request):
        nonlocal calls
        calls += 1
        if calls < 3:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, text=PAGE)

    fetcher = FetchClient(FetchConfig(), sleeper=sleeper, client=_client(handler))

    document = fetcher.fetch(URL)

    assert calls == 3
    assert document.title == "Acme - Wikipedia"
    # Backoff between failures, nothing after the final successful attempt
    assert sleeper.delays == [0.5, 1.0]


def test_exhausted_attempts_raise_fetch_error_with_last_cause():
    calls = 0
    sleeper = _RecordingSleeper()

    def handler(request):
        nonlocal calls
        calls += 1
        return httpx.Response(503, text="unavailable")

    fetcher = FetchClient(FetchConfig(), sleeper=sleeper, client=_client(handler))

    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch(URL)

    assert calls == 3
    assert excinfo.value.url == URL
    assert isinstance(excinfo.value.cause, httpx.HTTPStatusError)
    assert not excinfo.value.interrupted
    assert sleeper.delays == [0.5, 1.0]


def test_backoff_uses_configured_base_and_attempts():
    sleeper = _RecordingSleeper()

    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    cfg = FetchConfig(max_attempts=4, backoff_base_seconds=0.1)
    fetcher = FetchClient(cfg, sleeper=sleeper, client=_client(handler))

    with pytest.raises(FetchError):
        fetcher.fetch(URL)

    assert sleeper.delays == pytest.approx([0.1, 0.2, 0.4])


def test_empty_body_counts_as_failed_attempt():
    responses = iter([httpx.Response(200, text="  "), httpx.Response(200, text=PAGE)])
    sleeper = _RecordingSleeper()
    fetcher = FetchClient(FetchConfig(), sleeper=sleeper, client=_client(lambda r: next(responses)))

    document = fetcher.fetch(URL)

    assert document.title == "Acme - Wikipedia"
    assert sleeper.delays == [0.5, 0.35]


def test_interrupt_during_backoff_aborts_without_retrying():
    calls = 0
    sleeper = _RecordingSleeper(interrupt_on=1)

    def handler(request):
        nonlocal calls
        calls += 1
        return httpx.Response(500)

    fetcher = FetchClient(FetchConfig(), sleeper=sleeper, client=_client(handler))

    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch(URL)

    assert calls == 1
    assert excinfo.value.interrupted
    assert isinstance(excinfo.value.cause, Interrupted)


def test_cancelled_sleeper_raises_immediately():
    sleeper = Sleeper()
    sleeper.cancel()

    with pytest.raises(Interrupted):
        sleeper.sleep(10)


def test_sends_user_agent_and_follows_redirects():
    seen = []

    def handler(request):
        seen.append((str(request.url), request.headers.get("user-agent")))
        if request.url.path == "/wiki/ACME":
            return httpx.Response(301, headers={"Location": URL})
        return httpx.Response(200, text=PAGE)

    cfg = FetchConfig(user_agent="TestAgent/1.0", user_agent_env="")
    fetcher = FetchClient(cfg, sleeper=_RecordingSleeper(), client=_client(handler))

    document = fetcher.fetch("https://en.wikipedia.org/wiki/ACME")

    assert document.url == URL
    assert seen == [
        ("https://en.wikipedia.org/wiki/ACME", "TestAgent/1.0"),
        (URL, "TestAgent/1.0"),
    ]


def test_user_agent_env_override(monkeypatch):
    monkeypatch.setenv("FOUNDER_FINDER_USER_AGENT", "EnvAgent/2.0")

    client = _client(lambda r: httpx.Response(200, text=PAGE))
    fetcher = FetchClient(FetchConfig(), sleeper=_RecordingSleeper(), client=client)

    assert fetcher.user_agent == "EnvAgent/2.0"
