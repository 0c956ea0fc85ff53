"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching, retry and pacing settings
- WikiConfig: Target wiki host
- BatchConfig: Per-company pacing for batch runs
- OutputConfig: Output file settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for HTTP page fetching.

    Attributes:
        timeout_seconds: HTTP request timeout per attempt
        max_attempts: Total number of attempts per URL (first try included)
        backoff_base_seconds: Base delay for exponential backoff between attempts
        pacing_seconds: Courtesy delay after a successful fetch when attempts remain
        user_agent: HTTP User-Agent header string
        user_agent_env: Environment variable that overrides user_agent when set
        trust_env: Whether to respect system proxy settings
    """

    timeout_seconds: float = 12.0
    max_attempts: int = 3
    backoff_base_seconds: float = 0.5
    pacing_seconds: float = 0.35
    user_agent: str = "FounderFinder/1.0 (+contact)"
    user_agent_env: str = "FOUNDER_FINDER_USER_AGENT"
    trust_env: bool = True


@dataclass
class WikiConfig:
    """Configuration for the target wiki.

    Attributes:
        base_url: Scheme and host of the wiki, without trailing slash
    """

    base_url: str = "https://en.wikipedia.org"


@dataclass
class BatchConfig:
    """Configuration for batch processing.

    Attributes:
        delay_seconds: Pause between two companies (skipped after the last one)
    """

    delay_seconds: float = 0.4


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        default_filename: Output path used when none is given on the command line
        indent: JSON indentation level
    """

    default_filename: str = "founders.json"
    indent: int = 2


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file, written next to the output file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "founder_finder.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    wiki: WikiConfig = field(default_factory=WikiConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    A fresh AppConfig is returned on every call so CLI overrides never leak
    into the defaults.
    """
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "max_attempts": cfg.fetch.max_attempts,
            "backoff_base_seconds": cfg.fetch.backoff_base_seconds,
            "pacing_seconds": cfg.fetch.pacing_seconds,
            "user_agent": cfg.fetch.user_agent,
            "user_agent_env": cfg.fetch.user_agent_env,
            "trust_env": cfg.fetch.trust_env,
        },
        "wiki": {
            "base_url": cfg.wiki.base_url,
        },
        "batch": {
            "delay_seconds": cfg.batch.delay_seconds,
        },
        "output": {
            "default_filename": cfg.output.default_filename,
            "indent": cfg.output.indent,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        wiki=WikiConfig(**data["wiki"]),
        batch=BatchConfig(**data["batch"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_user_agent(cfg: FetchConfig) -> str:
    """Get the User-Agent from the environment override or inline config."""
    override = os.getenv(cfg.user_agent_env) if cfg.user_agent_env else None
    if override:
        return override
    return cfg.user_agent
