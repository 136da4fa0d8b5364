# SPDX-License-Identifier: Apache-2.0
"""PipelineRun source primitives."""
from __future__ import annotations

import abc
import logging
from typing import Any, Iterable, List, Mapping

from pipelinerun_exporter.errors import InvalidPipelineRun
from pipelinerun_exporter.runs import PipelineRun

log = logging.getLogger(__name__)


class PipelineRunSource(abc.ABC):
    """Returns the current snapshot of PipelineRuns visible to the exporter.

    Implementations raise :class:`~pipelinerun_exporter.errors.SourceUnavailable`
    when the snapshot cannot be fetched. Nothing is retried at this layer.
    """

    @abc.abstractmethod
    def list(self) -> List[PipelineRun]:  # pragma: no cover - interface
        raise NotImplementedError


def parse_items(items: Iterable[Mapping[str, Any]], *, origin: str) -> List[PipelineRun]:
    runs: List[PipelineRun] = []
    for item in items:
        if not isinstance(item, Mapping):
            log.warning("skipping non-object item from %s: %r", origin, item)
            continue
        try:
            runs.append(PipelineRun.from_object(item))
        except InvalidPipelineRun as exc:
            log.warning("skipping pipelinerun from %s err=%s", origin, exc)
    return runs
