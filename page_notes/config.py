"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- OutputConfig: Report file settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Environment variables (optionally from a .env file) override the YAML
values; command-line options override both.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any, Mapping

import yaml


@dataclass
class FetchConfig:
    """Configuration for HTTP page fetching.

    Attributes:
        timeout_seconds: HTTP request timeout
        connect_timeout_seconds: Connection establishment timeout
        user_agent: HTTP User-Agent header string
        trust_env: Whether to respect system proxy settings
    """

    timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 15.0
    user_agent: str = "HtmlToTextApp/1.0"
    trust_env: bool = True


@dataclass
class OutputConfig:
    """Configuration for the report file.

    Attributes:
        extension: Extension appended to report filenames that lack it
    """

    extension: str = ".md"


@dataclass
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        console: Whether to log to the console through rich
        file: Whether to write a log file next to the report
        format: Log file format, "jsonl" or "plain"
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "page_notes.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


ENV_PREFIX = "PAGE_NOTES_"


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def apply_env_overrides(cfg: AppConfig, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Override config values from PAGE_NOTES_* environment variables.

    Args:
        cfg: Configuration to update in place
        environ: Environment mapping, defaults to os.environ

    Returns:
        The same configuration object
    """
    env = os.environ if environ is None else environ

    if env.get(f"{ENV_PREFIX}USER_AGENT"):
        cfg.fetch.user_agent = env[f"{ENV_PREFIX}USER_AGENT"]
    if env.get(f"{ENV_PREFIX}TIMEOUT_SECONDS"):
        cfg.fetch.timeout_seconds = float(env[f"{ENV_PREFIX}TIMEOUT_SECONDS"])
    if env.get(f"{ENV_PREFIX}CONNECT_TIMEOUT_SECONDS"):
        cfg.fetch.connect_timeout_seconds = float(env[f"{ENV_PREFIX}CONNECT_TIMEOUT_SECONDS"])
    if env.get(f"{ENV_PREFIX}LOG_LEVEL"):
        cfg.logging.level = env[f"{ENV_PREFIX}LOG_LEVEL"]
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
