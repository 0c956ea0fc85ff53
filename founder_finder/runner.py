"""
Batch orchestration for Founder Finder.

This module coordinates the workflow for a company list:
1. Parse the input list
2. For each company, resolve the article, fetch it and extract founders
3. Pause between companies to stay within the wiki's rate expectations
4. Write the company to founders mapping as JSON

Companies are processed strictly one after another. A failure while
processing one company is logged and recorded as an empty founder list;
it never stops the batch. A cancelled Sleeper (shutdown request) stops
the batch before the next company, and the results collected so far are
still written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import httpx
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from .config import AppConfig
from .core.clock import Sleeper
from .core.types import BatchStats, Company, CompanyResult
from .errors import Interrupted
from .extract.founders import extract_founders
from .fetch.document import Document
from .fetch.fetcher import FetchClient
from .input.company_parser import parse_company_file
from .logging_utils import log_event, setup_logging
from .output.writer import write_founders_json
from .resolve.resolver import PageResolver


logger = logging.getLogger(__name__)

Extractor = Callable[[Document], list[str]]


def process_company(
    company: Company,
    resolver: PageResolver,
    fetcher: FetchClient,
    extract: Extractor = extract_founders,
) -> CompanyResult:
    """Resolve, fetch and extract founders for one company.

    Args:
        company: The company to process
        resolver: Resolver for the company's article URL
        fetcher: Client used to fetch the resolved article
        extract: Founder extractor applied to the article

    Returns:
        CompanyResult with an empty founder list when no article was resolved

    Raises:
        FetchError: If the resolved article cannot be fetched
    """
    url = resolver.resolve(company.name)
    if url is None:
        return CompanyResult(company=company)

    document = fetcher.fetch(url)
    founders = extract(document)
    return CompanyResult(company=company, url=url, founders=founders)


def run_batch(
    companies: list[Company],
    resolver: PageResolver,
    fetcher: FetchClient,
    sleeper: Sleeper,
    delay_seconds: float,
    extract: Extractor = extract_founders,
    progress: Progress | None = None,
    task_id: int | None = None,
) -> tuple[dict[str, list[str]], BatchStats]:
    """Process companies sequentially and collect their founders.

    Args:
        companies: Companies in input order
        resolver: Page resolver shared by all companies
        fetcher: Fetch client shared by all companies
        sleeper: Cancellable delay used for pacing between companies
        delay_seconds: Pause between two companies, skipped after the last
        extract: Founder extractor applied to each article
        progress: Optional Rich progress bar
        task_id: Task ID for progress updates

    Returns:
        Tuple of (company name to founders mapping, batch statistics)
    """
    founders: dict[str, list[str]] = {}
    stats = BatchStats(total=len(companies))

    for index, company in enumerate(companies):
        log_event(
            logger,
            f"Processing {company}",
            event="company_start",
            company=company.name,
            index=index + 1,
            total=len(companies),
        )
        try:
            result = process_company(company, resolver, fetcher, extract)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Failed to process %s: %s: %s",
                company.name,
                type(exc).__name__,
                exc,
                exc_info=True,
                extra={"event": "company_failed", "company": company.name},
            )
            result = CompanyResult(company=company, error=f"{type(exc).__name__}: {exc}")

        founders[company.name] = result.founders
        stats.record(result)
        log_event(
            logger,
            f"{company.name}: {result.founders}",
            event="company_done",
            company=company.name,
            url=result.url,
            count=len(result.founders),
        )
        if progress is not None and task_id is not None:
            progress.advance(task_id, 1)

        if sleeper.cancelled:
            _log_stopped(index + 1, len(companies))
            break
        if index < len(companies) - 1:
            try:
                sleeper.sleep(delay_seconds)
            except Interrupted:
                _log_stopped(index + 1, len(companies))
                break

    return founders, stats


def run_pipeline(
    input_path: Path,
    output_path: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
    sleeper: Sleeper | None = None,
    client: httpx.Client | None = None,
) -> Path:
    """Run the complete batch from company list to JSON file.

    Args:
        input_path: Path to the company list
        output_path: Path of the JSON file to write
        cfg: Application configuration
        show_progress: Whether to display a progress bar
        console: Rich console for output (creates default if None)
        sleeper: Shared cancellable delay; cancelling it stops the batch
        client: Optional preconfigured httpx client for all requests

    Returns:
        Path to the written JSON file

    Raises:
        OSError: If the input cannot be read or the output cannot be written
    """
    console = console or Console()
    sleeper = sleeper or Sleeper()
    run_logger = setup_logging(cfg.logging, output_path.parent)

    companies = parse_company_file(input_path)
    log_event(
        run_logger,
        "Pipeline start",
        event="pipeline_start",
        input=str(input_path),
        output=str(output_path),
        total=len(companies),
    )

    with FetchClient(cfg.fetch, sleeper=sleeper, client=client) as fetcher:
        resolver = PageResolver(fetcher, cfg.wiki.base_url)
        if show_progress:
            progress = Progress(
                SpinnerColumn(),
                TextColumn("{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeRemainingColumn(),
                console=console,
            )
            with progress:
                task_id = progress.add_task("Companies", total=len(companies))
                founders, stats = run_batch(
                    companies,
                    resolver,
                    fetcher,
                    sleeper,
                    cfg.batch.delay_seconds,
                    progress=progress,
                    task_id=task_id,
                )
        else:
            founders, stats = run_batch(
                companies, resolver, fetcher, sleeper, cfg.batch.delay_seconds
            )

    _render_batch_stats(stats, console)
    written = write_founders_json(founders, output_path, cfg.output.indent)
    log_event(
        run_logger,
        "Pipeline complete",
        event="pipeline_complete",
        output=str(written),
        total=stats.total,
        processed=len(founders),
    )
    return written


def _log_stopped(processed: int, total: int) -> None:
    log_event(
        logger,
        f"Shutdown requested; stopping after {processed} of {total} companies",
        level=logging.WARNING,
        event="batch_stopped",
        processed=processed,
        total=total,
    )


def _render_batch_stats(stats: BatchStats, console: Console) -> None:
    """Display batch statistics to the console.

    Args:
        stats: Batch statistics to display
        console: Rich console for output
    """
    console.print(
        "[bold]Batch summary[/bold]: "
        f"total={stats.total}, resolved={stats.resolved}, unresolved={stats.unresolved}, "
        f"with_founders={stats.with_founders}, failed={stats.failed}"
    )
