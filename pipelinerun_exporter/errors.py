# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the exporter."""
from __future__ import annotations

from typing import Sequence


class ExporterError(Exception):
    """Base class for exporter failures."""


class ConfigError(ExporterError):
    """Raised when the exporter configuration cannot be used."""


class SourceUnavailable(ExporterError):
    """Raised when the PipelineRun list could not be fetched."""


class InvalidPipelineRun(ExporterError):
    """Raised when an object lacks the fields that identify a PipelineRun."""


class DurationError(ExporterError):
    def __init__(self, run_name: str, message: str):
        super().__init__(f"pipelinerun {run_name}: {message}")
        self.run_name = run_name


class MissingTimestamp(DurationError):
    def __init__(self, run_name: str, fields: Sequence[str]):
        self.fields = tuple(fields)
        super().__init__(run_name, f"missing timestamp(s): {', '.join(self.fields)}")


class InvalidOrdering(DurationError):
    def __init__(self, run_name: str, start_field: str, end_field: str, seconds: float):
        self.start_field = start_field
        self.end_field = end_field
        self.seconds = seconds
        super().__init__(run_name, f"{end_field} precedes {start_field} by {-seconds:.3f}s")
