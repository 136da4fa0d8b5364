"""Exporter process: config, source and scrape endpoint wiring."""
from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
from typing import Optional, Sequence

from prometheus_client import CollectorRegistry, start_http_server

from .collector import PipelineRunCollector
from .config import ExporterConfig, load_config, parse_log_level
from .errors import ConfigError
from .sources import PipelineRunSource, create_source

log = logging.getLogger("pipelinerun_exporter")


def build_registry(collector: PipelineRunCollector) -> CollectorRegistry:
    registry = CollectorRegistry()
    registry.register(collector)
    return registry


class PipelineRunExporter:
    def __init__(self, config: ExporterConfig, source: Optional[PipelineRunSource] = None):
        self.config = config
        self.source = source if source is not None else create_source(config.source)
        self.collector = PipelineRunCollector(self.source)
        self.registry = build_registry(self.collector)
        self._server = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        if self._server is None:
            raise RuntimeError("exporter not started")
        return self._server.server_port

    def start(self) -> None:
        if self._server is not None:
            return
        self._server, self._thread = start_http_server(
            self.config.metrics.port,
            addr=self.config.metrics.host,
            registry=self.registry,
        )
        log.info(
            "serving pipelinerun metrics on %s:%d (source=%s)",
            self.config.metrics.host,
            self.port,
            self.config.source.type,
        )

    def stop(self) -> None:
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join(timeout=5)
        self._server = None
        self._thread = None
        log.info("exporter stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prometheus exporter for Tekton PipelineRun durations")
    parser.add_argument("--config", default=None, help="path to the exporter YAML config")
    parser.add_argument("--host", default=None, help="address to bind the metrics endpoint to")
    parser.add_argument("--port", type=int, default=None, help="port for the metrics endpoint")
    parser.add_argument("--log-level", default=None, help="logging level (DEBUG, INFO, ...)")
    return parser


def resolve_config(args: argparse.Namespace) -> ExporterConfig:
    config = load_config(args.config)
    if args.host is not None:
        config.metrics.host = args.host
    if args.port is not None:
        config.metrics.port = args.port
    if args.log_level is not None:
        config.log_level = parse_log_level(args.log_level)
    return config


def run(exporter: PipelineRunExporter, stop_event: threading.Event) -> None:
    exporter.start()
    try:
        stop_event.wait()
        log.info("shutdown requested")
    finally:
        exporter.stop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args)
        logging.getLogger().setLevel(config.log_level)
        exporter = PipelineRunExporter(config)
    except ConfigError as exc:
        log.error("invalid configuration: %s", exc)
        return 2

    stop_event = threading.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, lambda *_: stop_event.set())
    run(exporter, stop_event)
    return 0


if __name__ == "__main__":
    sys.exit(main())
