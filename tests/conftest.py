# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for exporter tests."""
from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from pipelinerun_exporter.runs import PipelineRun
from pipelinerun_exporter.sources.base import PipelineRunSource

T0 = datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class StaticSource(PipelineRunSource):
    """Source returning a mutable list of runs, or raising a queued error."""

    def __init__(self, runs: Optional[List[PipelineRun]] = None):
        self.runs = list(runs or [])
        self.error: Optional[Exception] = None
        self.calls = 0

    def list(self) -> List[PipelineRun]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.runs)


class BlockingSource(PipelineRunSource):
    """Source that blocks inside list() until released."""

    def __init__(self, runs: List[PipelineRun]):
        self.runs = runs
        self.entered = threading.Event()
        self.release = threading.Event()
        self.calls = 0
        self.active = 0
        self.max_active = 0
        self._guard = threading.Lock()

    def list(self) -> List[PipelineRun]:
        with self._guard:
            self.calls += 1
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        self.entered.set()
        self.release.wait(timeout=5)
        with self._guard:
            self.active -= 1
        return list(self.runs)


def make_run(
    name: str = "build-1",
    uid: str = "uid-1",
    *,
    scheduled_after: Optional[float] = 5.0,
    completed_after: Optional[float] = 20.0,
    created: Optional[datetime] = T0,
) -> PipelineRun:
    def offset(seconds: Optional[float]) -> Optional[datetime]:
        if seconds is None:
            return None
        return T0 + timedelta(seconds=seconds)

    return PipelineRun(
        name=name,
        uid=uid,
        namespace="ci",
        created=created,
        started=offset(scheduled_after),
        completed=offset(completed_after),
    )


def sample_map(families: Iterable) -> Dict[Tuple[str, str, str], float]:
    """Flatten metric families into {(metric, name, uid): value}."""
    values: Dict[Tuple[str, str, str], float] = {}
    for family in families:
        for sample in family.samples:
            values[(sample.name, sample.labels["name"], sample.labels["uid"])] = sample.value
    return values


@pytest.fixture
def run_factory():
    return make_run


@pytest.fixture
def static_source():
    return StaticSource()


@pytest.fixture
def samples():
    return sample_map
