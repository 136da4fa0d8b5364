# SPDX-License-Identifier: Apache-2.0
"""Gauge collections exported for PipelineRuns."""
from __future__ import annotations

from typing import List

from prometheus_client import Gauge
from prometheus_client.metrics_core import Metric

SCHEDULED_METRIC = "pipelinerun_duration_scheduled_seconds"
COMPLETED_METRIC = "pipelinerun_duration_completed_seconds"
LABEL_NAMES = ("name", "uid")


class MetricRegistry:
    """Owns the scheduled/completed gauges keyed by (name, uid).

    The gauges are created with ``registry=None`` so they never land on the
    process-wide default registry; they are exported through the collector
    that owns this object.
    """

    def __init__(self) -> None:
        self.scheduled = Gauge(
            SCHEDULED_METRIC,
            "Duration in seconds for a PipelineRun to be scheduled.",
            labelnames=LABEL_NAMES,
            registry=None,
        )
        self.completed = Gauge(
            COMPLETED_METRIC,
            "Duration in seconds for a PipelineRun to complete.",
            labelnames=LABEL_NAMES,
            registry=None,
        )

    def set_scheduled(self, name: str, uid: str, value: float) -> None:
        self.scheduled.labels(name, uid).set(value)

    def set_completed(self, name: str, uid: str, value: float) -> None:
        self.completed.labels(name, uid).set(value)

    def describe(self) -> List[Metric]:
        return [*self.scheduled.describe(), *self.completed.describe()]

    def collect(self) -> List[Metric]:
        return [*self.scheduled.collect(), *self.completed.collect()]
