# SPDX-License-Identifier: Apache-2.0
"""PipelineRun records as seen by the exporter."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .errors import InvalidPipelineRun

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class PipelineRun:
    """Read-only view of a Tekton PipelineRun's identity and lifecycle timestamps."""

    name: str
    uid: str
    namespace: Optional[str] = None
    created: Optional[datetime] = None
    started: Optional[datetime] = None
    completed: Optional[datetime] = None

    @classmethod
    def from_object(cls, obj: Mapping[str, Any]) -> "PipelineRun":
        metadata = obj.get("metadata") or {}
        status = obj.get("status") or {}
        name = metadata.get("name")
        uid = metadata.get("uid")
        if not name or not uid:
            raise InvalidPipelineRun(f"object is missing metadata.name or metadata.uid: {metadata!r}")
        return cls(
            name=str(name),
            uid=str(uid),
            namespace=metadata.get("namespace"),
            created=parse_timestamp(metadata.get("creationTimestamp")),
            started=parse_timestamp(status.get("startTime")),
            completed=parse_timestamp(status.get("completionTime")),
        )


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp; unparsable values are treated as unset."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        ts = value
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            ts = datetime.fromisoformat(text)
        except ValueError:
            log.warning("ignoring unparsable timestamp value=%r", value)
            return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts
