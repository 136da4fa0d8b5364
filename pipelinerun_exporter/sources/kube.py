# SPDX-License-Identifier: Apache-2.0
"""Kubernetes API source listing Tekton PipelineRuns."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import urllib3
from kubernetes import client
from kubernetes import config as kube_config
from kubernetes.client.rest import ApiException

from pipelinerun_exporter.errors import SourceUnavailable
from pipelinerun_exporter.runs import PipelineRun

from .base import PipelineRunSource, parse_items

log = logging.getLogger(__name__)

TEKTON_GROUP = "tekton.dev"
PIPELINERUN_PLURAL = "pipelineruns"


def _load_api_client(kubeconfig: Optional[str], context: Optional[str]) -> client.ApiClient:
    if kubeconfig is None and context is None:
        configuration = client.Configuration()
        try:
            kube_config.load_incluster_config(client_configuration=configuration)
            log.info("using in-cluster kubernetes credentials")
            return client.ApiClient(configuration)
        except kube_config.ConfigException:
            log.debug("in-cluster credentials unavailable; falling back to kubeconfig")
    return kube_config.new_client_from_config(config_file=kubeconfig, context=context)


class KubernetesPipelineRunSource(PipelineRunSource):
    def __init__(
        self,
        *,
        namespace: Optional[str] = None,
        api_version: str = "v1",
        label_selector: Optional[str] = None,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        timeout_s: Optional[float] = None,
        api: Any = None,
    ):
        self.namespace = namespace
        self.api_version = api_version
        self.label_selector = label_selector
        self.kubeconfig = kubeconfig
        self.context = context
        self.timeout_s = float(timeout_s) if timeout_s is not None else None
        self._api = api

    def _get_api(self) -> Any:
        if self._api is None:
            try:
                api_client = _load_api_client(self.kubeconfig, self.context)
            except (kube_config.ConfigException, OSError) as exc:
                raise SourceUnavailable(f"cannot load kubernetes credentials: {exc}") from exc
            self._api = client.CustomObjectsApi(api_client)
        return self._api

    def list(self) -> List[PipelineRun]:
        api = self._get_api()
        kwargs: Dict[str, Any] = {}
        if self.label_selector:
            kwargs["label_selector"] = self.label_selector
        if self.timeout_s is not None:
            kwargs["_request_timeout"] = self.timeout_s
        scope = self.namespace or "<all namespaces>"
        try:
            if self.namespace:
                response = api.list_namespaced_custom_object(
                    TEKTON_GROUP, self.api_version, self.namespace, PIPELINERUN_PLURAL, **kwargs
                )
            else:
                response = api.list_cluster_custom_object(TEKTON_GROUP, self.api_version, PIPELINERUN_PLURAL, **kwargs)
        except ApiException as exc:
            raise SourceUnavailable(
                f"listing pipelineruns in {scope} failed: status={exc.status} reason={exc.reason}"
            ) from exc
        except urllib3.exceptions.HTTPError as exc:
            raise SourceUnavailable(f"listing pipelineruns in {scope} failed: {exc}") from exc
        items = (response or {}).get("items") or []
        log.debug("listed %d pipelineruns in %s", len(items), scope)
        return parse_items(items, origin=f"kubernetes:{scope}")
