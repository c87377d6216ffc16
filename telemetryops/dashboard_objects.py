"""Clean-up of the console dashboard artifacts of a MetricStorage instance."""

from __future__ import annotations

from .kube import KubeClient, ensure_deleted
from .model import MetricStorage

DASHBOARD_ARTIFACTS_NAMESPACE = "openshift-config-managed"

DASHBOARD_CONFIG_MAPS = (
    "grafana-dashboard-openstack-cloud",
    "grafana-dashboard-openstack-node",
    "grafana-dashboard-openstack-vm",
    "grafana-dashboard-openstack-rabbitmq",
    "grafana-dashboard-openstack-kepler",
)


def _datasource_name(instance: MetricStorage) -> str:
    return f"{instance.namespace}-{instance.name}-datasource"


def _dashboard_objects(instance: MetricStorage):
    yield {
        "apiVersion": "monitoring.rhobs/v1",
        "kind": "PrometheusRule",
        "metadata": {"name": instance.name, "namespace": instance.namespace},
    }
    for name in (_datasource_name(instance), *DASHBOARD_CONFIG_MAPS):
        yield {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": name, "namespace": DASHBOARD_ARTIFACTS_NAMESPACE},
        }


def delete_dashboard_objects(
    client: KubeClient, instance: MetricStorage
) -> list[tuple[str, str, str]]:
    """Delete the recording rules, datasource and dashboards of an instance.

    Objects already gone or already being deleted are skipped. Returns the
    (kind, namespace, name) of every object a delete was issued for, in order.
    Errors from the client stop the clean-up and propagate.
    """
    deleted = []
    for obj in _dashboard_objects(instance):
        if ensure_deleted(client, obj):
            meta = obj["metadata"]
            deleted.append((obj["kind"], meta["namespace"], meta["name"]))
    return deleted