"""MonitoringStack manifest for a MetricStorage instance."""

from __future__ import annotations

import re

from .constants import DEFAULT_PVC_STORAGE_REQUEST, PROMETHEUS_REPLICAS
from .model import MetricStorage

_QUANTITY = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
    r"(?:Ki|Mi|Gi|Ti|Pi|Ei|n|u|m|k|M|G|T|P|E|[eE][+-]?\d+)?"
)


def parse_quantity(text: str) -> str:
    """Validate a Kubernetes resource quantity and return it."""
    if not text:
        raise ValueError("quantities must match the regular expression: empty quantity")
    if not _QUANTITY.fullmatch(text):
        raise ValueError(f"invalid resource quantity: {text!r}")
    return text


def pvc_spec(instance: MetricStorage) -> dict | None:
    """Build the persistent volume claim spec, or None unless storage is persistent."""
    stack = instance.monitoring_stack
    if stack is None:
        raise ValueError("monitoringStack is set to nil")
    storage = stack.storage
    if storage.strategy != "persistent":
        return None
    persistent = storage.persistent
    if persistent is None:
        raise ValueError("Received a nil value in persistent storage config")

    pvc: dict = {}
    if persistent.pvc_storage_selector:
        pvc["selector"] = dict(persistent.pvc_storage_selector)
    if persistent.pvc_storage_class:
        pvc["storageClassName"] = persistent.pvc_storage_class
    # The persistent section may be omitted entirely, so the default request
    # is applied here rather than relying on resource defaults.
    request = persistent.pvc_storage_request or DEFAULT_PVC_STORAGE_REQUEST
    pvc["resources"] = {"requests": {"storage": parse_quantity(request)}}
    return pvc


def monitoring_stack(instance: MetricStorage, labels: dict) -> dict:
    """Build the MonitoringStack manifest for a MetricStorage instance."""
    stack = instance.monitoring_stack
    if stack is None:
        raise ValueError("monitoringStack is set to nil")
    pvc = pvc_spec(instance)

    prometheus_config: dict = {
        "replicas": PROMETHEUS_REPLICAS,
        "scrapeInterval": stack.scrape_interval,
    }
    if pvc is not None:
        prometheus_config["persistentVolumeClaim"] = pvc

    return {
        "apiVersion": "monitoring.rhobs/v1alpha1",
        "kind": "MonitoringStack",
        "metadata": {
            "name": instance.name,
            "namespace": instance.namespace,
            "labels": dict(labels),
        },
        "spec": {
            "alertmanagerConfig": {"disabled": not stack.alerting_enabled},
            "prometheusConfig": prometheus_config,
            "retention": stack.storage.retention,
            "resourceSelector": {"matchLabels": dict(labels)},
        },
    }