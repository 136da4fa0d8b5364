"""PipelineRun source factory."""
from __future__ import annotations

from typing import Callable

from pipelinerun_exporter.config import SourceConfig
from pipelinerun_exporter.errors import ConfigError

from .base import PipelineRunSource

SOURCE_TYPES: dict[str, Callable[..., PipelineRunSource]] = {}


def register(source_type: str, factory: Callable[..., PipelineRunSource]) -> None:
    SOURCE_TYPES[source_type] = factory


def create_source(cfg: SourceConfig) -> PipelineRunSource:
    if cfg.type not in SOURCE_TYPES:
        raise ConfigError(f"unknown source type '{cfg.type}'")
    try:
        return SOURCE_TYPES[cfg.type](**cfg.options)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid options for source '{cfg.type}': {exc}") from exc


from .file import FilePipelineRunSource
from .kube import KubernetesPipelineRunSource

register("kubernetes", lambda **opts: KubernetesPipelineRunSource(**opts))
register("file", lambda **opts: FilePipelineRunSource(**opts))

__all__ = [
    "FilePipelineRunSource",
    "KubernetesPipelineRunSource",
    "PipelineRunSource",
    "create_source",
    "register",
]
