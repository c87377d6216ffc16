"""The parts of a MetricStorage resource the manifests are built from."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PersistentStorage:
    """Persistent volume settings for Prometheus storage."""

    pvc_storage_request: str = ""
    pvc_storage_class: str = ""
    pvc_storage_selector: dict = field(default_factory=dict)


@dataclass
class StorageSpec:
    """How Prometheus keeps its data."""

    strategy: str = ""
    retention: str = ""
    persistent: PersistentStorage | None = None


@dataclass
class MonitoringStackSpec:
    """Settings for an operator-managed monitoring stack."""

    alerting_enabled: bool = False
    scrape_interval: str = ""
    storage: StorageSpec = field(default_factory=StorageSpec)


@dataclass
class CustomMonitoringStack:
    """A user-provided monitoring stack; only its scrape interval is used."""

    scrape_interval: str | None = None


@dataclass
class PrometheusTLS:
    """TLS settings for the Prometheus endpoint."""

    secret_name: str | None = None
    ca_bundle_secret_name: str = ""

    def enabled(self) -> bool:
        return bool(self.secret_name)


@dataclass
class MetricStorage:
    """A MetricStorage instance: identity plus spec."""

    name: str
    namespace: str
    monitoring_stack: MonitoringStackSpec | None = None
    custom_monitoring_stack: CustomMonitoringStack | None = None
    prometheus_tls: PrometheusTLS = field(default_factory=PrometheusTLS)