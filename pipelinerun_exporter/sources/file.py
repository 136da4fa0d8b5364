# SPDX-License-Identifier: Apache-2.0
"""Source reading PipelineRun manifests from a YAML or JSON file."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml

from pipelinerun_exporter.errors import SourceUnavailable
from pipelinerun_exporter.runs import PipelineRun

from .base import PipelineRunSource, parse_items


def _extract_items(document: Any, path: Path) -> List[Any]:
    if document is None:
        return []
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        if "items" in document:
            return document.get("items") or []
        if "metadata" in document:
            return [document]
    raise SourceUnavailable(f"{path} does not contain a PipelineRun list or object")


class FilePipelineRunSource(PipelineRunSource):
    """Reads ``kubectl get pipelineruns -o yaml`` style output on every call."""

    def __init__(self, *, path: str | Path):
        self.path = Path(path)

    def list(self) -> List[PipelineRun]:
        try:
            document = yaml.safe_load(self.path.read_text())
        except OSError as exc:
            raise SourceUnavailable(f"cannot read {self.path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SourceUnavailable(f"cannot parse {self.path}: {exc}") from exc
        return parse_items(_extract_items(document, self.path), origin=str(self.path))
