"""LoadBalancer service exposing the cluster log collector."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import LOGGING_SERVICE_NAME
from .kube import KubeClient, OperationResult, create_or_update

_COLLECTOR_SELECTOR = {
    "app.kubernetes.io/instance": "collector",
    "component": "collector",
    "provider": "openshift",
}


@dataclass
class LoggingSpec:
    """Settings of a Logging instance used to build its service."""

    clo_namespace: str
    port: int
    target_port: int
    annotations: dict = field(default_factory=dict)


def _skeleton(spec: LoggingSpec) -> dict:
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {
            "name": f"openstack-{LOGGING_SERVICE_NAME}",
            "namespace": spec.clo_namespace,
        },
    }


def _apply(service: dict, spec: LoggingSpec, labels: dict) -> None:
    body = service.setdefault("spec", {})
    body["ports"] = [
        {"protocol": "TCP", "port": spec.port, "targetPort": spec.target_port}
    ]
    body["selector"] = dict(_COLLECTOR_SELECTOR)
    body["type"] = "LoadBalancer"
    meta = service.setdefault("metadata", {})
    meta["annotations"] = dict(spec.annotations)
    meta["labels"] = dict(labels)


def service_manifest(spec: LoggingSpec, labels: dict) -> dict:
    """Build the desired Service for the log collector."""
    service = _skeleton(spec)
    _apply(service, spec, labels)
    return service


def create_or_update_service(
    client: KubeClient, spec: LoggingSpec, labels: dict
) -> tuple[dict, OperationResult]:
    """Create or update the log collector Service; return it and what was done."""
    service = _skeleton(spec)
    result = create_or_update(client, service, lambda obj: _apply(obj, spec, labels))
    return service, result