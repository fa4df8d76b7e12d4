"""Configuration model for fpx-trace.

Captures fpx-trace.yaml fields with defaults that point at a
Fiberplane Studio instance running locally. The collector URL is
project configuration only; it is never a command-line option.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

CONFIG_FILENAME = "fpx-trace.yaml"
DEFAULT_BASE_URL = "http://localhost:8788"


class TraceConfig(BaseModel):
    """Settings for talking to the collector and listing traces."""

    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    # Span name shown in trace listings. None lists every span.
    top_level_span: str | None = "request"


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk up from start (default: cwd) looking for fpx-trace.yaml.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        Path to the config file, or None if no ancestor has one.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(config_path: Path | None = None) -> TraceConfig:
    """Load TraceConfig from fpx-trace.yaml. Returns defaults if not found.

    Args:
        config_path: Explicit path to the config file. If None, uses
            find_config_file() to locate it.

    Returns:
        Validated TraceConfig instance.
    """
    if config_path is None:
        config_path = find_config_file()
    if config_path is None or not config_path.exists():
        return TraceConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return TraceConfig()
    return TraceConfig.model_validate(raw)
