"""Prometheus exporter for Tekton PipelineRun scheduling and completion durations."""
from __future__ import annotations

from .collector import PipelineRunCollector
from .durations import calculate_completed_duration, calculate_scheduled_duration
from .metrics import MetricRegistry
from .runs import PipelineRun

__all__ = [
    "MetricRegistry",
    "PipelineRun",
    "PipelineRunCollector",
    "calculate_completed_duration",
    "calculate_scheduled_duration",
]
