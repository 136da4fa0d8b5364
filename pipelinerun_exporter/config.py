"""Configuration loader for the exporter."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

DEFAULT_METRICS_PORT = 9117


@dataclass(slots=True)
class MetricsConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_METRICS_PORT


@dataclass(slots=True)
class SourceConfig:
    type: str = "kubernetes"
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ExporterConfig:
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    log_level: str = "INFO"


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    data = raw.get(key) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return data


def _parse_metrics(data: Dict[str, Any]) -> MetricsConfig:
    try:
        port = int(data.get("port", DEFAULT_METRICS_PORT))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"metrics.port must be an integer, got {data.get('port')!r}") from exc
    if not 0 <= port <= 65535:
        raise ConfigError(f"metrics.port out of range: {port}")
    return MetricsConfig(host=str(data.get("host", "0.0.0.0")), port=port)


def _parse_source(data: Dict[str, Any]) -> SourceConfig:
    source_type = data.get("type", "kubernetes")
    if not isinstance(source_type, str) or not source_type:
        raise ConfigError("source.type must be a non-empty string")
    options = {k: v for k, v in data.items() if k != "type"}
    return SourceConfig(type=source_type, options=options)


def parse_log_level(value: Any) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log level '{value}'")
    return level


def load_config(path: Optional[str | Path]) -> ExporterConfig:
    if path is None:
        return ExporterConfig()
    try:
        raw = yaml.safe_load(Path(path).read_text())
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return ExporterConfig(
        metrics=_parse_metrics(_section(raw, "metrics")),
        source=_parse_source(_section(raw, "source")),
        log_level=parse_log_level(raw.get("log_level", "INFO")),
    )
