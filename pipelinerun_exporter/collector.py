# SPDX-License-Identifier: Apache-2.0
"""Custom Prometheus collector computing PipelineRun durations on scrape."""
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

from .durations import calculate_completed_duration, calculate_scheduled_duration
from .errors import DurationError, SourceUnavailable
from .metrics import MetricRegistry
from .runs import PipelineRun
from .sources.base import PipelineRunSource

log = logging.getLogger(__name__)


class PipelineRunCollector(Collector):
    """Refreshes the duration gauges from a PipelineRun source on every scrape.

    A pass lists the runs, derives both durations per run and snapshots the
    gauges. Passes are serialized by a lock so overlapping scrapes never
    interleave gauge updates or export a mixed snapshot. Errors are logged
    and never reach the exporter: a failed listing exports the previously
    held values, a failed calculation skips only that gauge for that run.
    Label tuples of runs that disappear from the source are kept.
    """

    def __init__(self, source: PipelineRunSource, metrics: Optional[MetricRegistry] = None):
        self.source = source
        self.metrics = metrics if metrics is not None else MetricRegistry()
        self._lock = threading.Lock()

    def describe(self) -> List[Metric]:
        return self.metrics.describe()

    def collect(self) -> List[Metric]:
        with self._lock:
            try:
                runs = self.source.list()
            except SourceUnavailable as exc:
                log.error("error while fetching pipelineruns err=%s", exc)
            except Exception:
                log.exception("unexpected error while fetching pipelineruns")
            else:
                for run in runs:
                    self._update(run)
            return self.metrics.collect()

    def _update(self, run: PipelineRun) -> None:
        self._set(run, "scheduled", calculate_scheduled_duration, self.metrics.set_scheduled)
        self._set(run, "completed", calculate_completed_duration, self.metrics.set_completed)

    @staticmethod
    def _set(
        run: PipelineRun,
        kind: str,
        calculate: Callable[[PipelineRun], float],
        setter: Callable[[str, str, float], None],
    ) -> None:
        try:
            seconds = calculate(run)
        except DurationError as exc:
            log.error(
                "error while calculating the %s duration of a pipelinerun name=%s uid=%s err=%s",
                kind,
                run.name,
                run.uid,
                exc,
            )
            return
        setter(run.name, run.uid, seconds)
