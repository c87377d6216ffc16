"""ScrapeConfig manifest that points Prometheus at a set of static targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .constants import DEFAULT_SCRAPE_INTERVAL, TLS_CA_BUNDLE_KEY
from .model import MetricStorage

_DROPPED_LABELS = ("pod", "namespace", "job", "publisher")


@dataclass(frozen=True)
class LabeledTarget:
    """A scrape target address together with the host's FQDN."""

    ip: str
    fqdn: str


def _scrape_interval(instance: MetricStorage) -> str:
    stack = instance.monitoring_stack
    if stack is not None and stack.scrape_interval:
        return stack.scrape_interval
    custom = instance.custom_monitoring_stack
    if custom is not None and custom.scrape_interval:
        return custom.scrape_interval
    return DEFAULT_SCRAPE_INTERVAL


def _static_configs(targets: Iterable) -> list[dict]:
    items = list(targets)
    if all(isinstance(item, str) for item in items):
        return [{"targets": sorted(items)}]
    if all(isinstance(item, LabeledTarget) for item in items):
        return [
            {"targets": [item.ip], "labels": {"fqdn": item.fqdn}}
            for item in sorted(items, key=lambda t: t.ip)
        ]
    return []


def _ca_selector(name: str) -> dict:
    return {"key": TLS_CA_BUNDLE_KEY, "name": name}


def scrape_config(
    instance: MetricStorage, labels: dict, targets: Iterable, tls_enabled: bool
) -> dict:
    """Build the ScrapeConfig for plain address targets or LabeledTargets.

    Targets of any other kind produce no static configs.
    """
    spec: dict = {
        "metricRelabelings": [
            {"action": "labeldrop", "regex": label, "sourceLabels": []}
            for label in _DROPPED_LABELS
        ],
        "scrapeInterval": _scrape_interval(instance),
        "staticConfigs": _static_configs(targets),
    }
    if tls_enabled:
        ca_selector = _ca_selector(instance.prometheus_tls.ca_bundle_secret_name)
        spec["scheme"] = "HTTPS"
        spec["tlsConfig"] = {"ca": {"secret": ca_selector}}
    return {
        "apiVersion": "monitoring.rhobs/v1alpha1",
        "kind": "ScrapeConfig",
        "metadata": {
            "name": instance.name,
            "namespace": instance.namespace,
            "labels": dict(labels),
        },
        "spec": spec,
    }