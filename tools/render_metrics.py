#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Run one collection pass against a PipelineRun manifest and print the exposition text."""
from __future__ import annotations

import argparse
import logging
import sys

from prometheus_client import generate_latest

from pipelinerun_exporter.app import build_registry
from pipelinerun_exporter.collector import PipelineRunCollector
from pipelinerun_exporter.sources import FilePipelineRunSource


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="output of `kubectl get pipelineruns -A -o yaml` (or JSON)")
    args = ap.parse_args()

    registry = build_registry(PipelineRunCollector(FilePipelineRunSource(path=args.path)))
    sys.stdout.write(generate_latest(registry).decode("utf-8"))


if __name__ == "__main__":
    main()
