# SPDX-License-Identifier: Apache-2.0
"""Duration derivations from PipelineRun lifecycle timestamps.

Both durations are measured from the creation timestamp, so the completed
duration covers queueing time as well as execution time.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .errors import InvalidOrdering, MissingTimestamp
from .runs import PipelineRun


def _elapsed(run: PipelineRun, start_field: str, end_field: str) -> float:
    start: Optional[datetime] = getattr(run, start_field)
    end: Optional[datetime] = getattr(run, end_field)
    missing = [field for field, value in ((start_field, start), (end_field, end)) if value is None]
    if missing:
        raise MissingTimestamp(run.name, missing)
    seconds = (end - start).total_seconds()
    if seconds < 0:
        raise InvalidOrdering(run.name, start_field, end_field, seconds)
    return seconds


def calculate_scheduled_duration(run: PipelineRun) -> float:
    """Seconds between creation and the start of execution."""
    return _elapsed(run, "created", "started")


def calculate_completed_duration(run: PipelineRun) -> float:
    """Seconds between creation and completion."""
    return _elapsed(run, "created", "completed")
