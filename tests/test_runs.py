# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pipelinerun_exporter.errors import InvalidPipelineRun
from pipelinerun_exporter.runs import PipelineRun, parse_timestamp


def _object(**status):
    return {
        "apiVersion": "tekton.dev/v1",
        "kind": "PipelineRun",
        "metadata": {
            "name": "build-abc",
            "namespace": "ci",
            "uid": "2f1c6a0e-8f0e-4f59-9d8a-1a2b3c4d5e6f",
            "creationTimestamp": "2023-05-01T12:00:00Z",
        },
        "status": status,
    }


def test_from_object_reads_identity_and_timestamps():
    run = PipelineRun.from_object(
        _object(startTime="2023-05-01T12:00:05Z", completionTime="2023-05-01T12:00:20Z")
    )
    assert run.name == "build-abc"
    assert run.uid == "2f1c6a0e-8f0e-4f59-9d8a-1a2b3c4d5e6f"
    assert run.namespace == "ci"
    assert run.created == datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert run.started == datetime(2023, 5, 1, 12, 0, 5, tzinfo=timezone.utc)
    assert run.completed == datetime(2023, 5, 1, 12, 0, 20, tzinfo=timezone.utc)


def test_pending_run_has_no_start_or_completion():
    obj = _object()
    del obj["status"]
    run = PipelineRun.from_object(obj)
    assert run.started is None
    assert run.completed is None


@pytest.mark.parametrize("missing", ["name", "uid"])
def test_missing_identity_is_invalid(missing):
    obj = _object()
    del obj["metadata"][missing]
    with pytest.raises(InvalidPipelineRun):
        PipelineRun.from_object(obj)


def test_unparsable_timestamp_is_treated_as_unset(caplog):
    run = PipelineRun.from_object(_object(startTime="not-a-time"))
    assert run.started is None
    assert "unparsable timestamp" in caplog.text


def test_parse_timestamp_handles_offsets_and_naive_datetimes():
    assert parse_timestamp("2023-05-01T14:00:00+02:00") == datetime(2023, 5, 1, 12, tzinfo=timezone.utc)
    assert parse_timestamp(datetime(2023, 5, 1, 12)) == datetime(2023, 5, 1, 12, tzinfo=timezone.utc)
    assert parse_timestamp("") is None
    assert parse_timestamp(None) is None


def test_fractional_seconds_of_any_precision_are_parsed():
    ts = parse_timestamp("2023-05-01T12:00:00.12345Z")
    assert ts == datetime(2023, 5, 1, 12, 0, 0, 123450, tzinfo=timezone.utc)
