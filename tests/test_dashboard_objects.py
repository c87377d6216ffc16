import pytest

from telemetryops.dashboard_objects import (
    DASHBOARD_CONFIG_MAPS,
    delete_dashboard_objects,
)
from telemetryops.kube import KubeClient
from telemetryops.model import MetricStorage


def _obj(kind, namespace, name, **meta):
    return {"kind": kind, "metadata": {"name": name, "namespace": namespace, **meta}}


@pytest.fixture
def instance():
    return MetricStorage(name="metric-storage", namespace="openstack")


def _all_objects():
    objs = [
        _obj("PrometheusRule", "openstack", "metric-storage"),
        _obj(
            "ConfigMap",
            "openshift-config-managed",
            "openstack-metric-storage-datasource",
        ),
    ]
    objs += [_obj("ConfigMap", "openshift-config-managed", n) for n in DASHBOARD_CONFIG_MAPS]
    return objs


def test_deletes_everything_in_order(instance):
    client = KubeClient(_all_objects())
    deleted = delete_dashboard_objects(client, instance)
    assert deleted[0] == ("PrometheusRule", "openstack", "metric-storage")
    assert deleted[1] == (
        "ConfigMap",
        "openshift-config-managed",
        "openstack-metric-storage-datasource",
    )
    assert [name for _, _, name in deleted[2:]] == list(DASHBOARD_CONFIG_MAPS)
    assert len(client) == 0


def test_dashboards_deleted_from_config_managed_namespace(instance):
    client = KubeClient(_all_objects())
    deleted = delete_dashboard_objects(client, instance)
    dashboards = deleted[2:]
    assert len(dashboards) == 5
    assert {ns for _, ns, _ in dashboards} == {"openshift-config-managed"}
    names = [name for _, _, name in dashboards]
    assert "grafana-dashboard-openstack-vm" in names
    assert "grafana-dashboard-openstack-rabbitmq" in names


def test_missing_objects_are_skipped(instance):
    client = KubeClient()
    assert delete_dashboard_objects(client, instance) == []


def test_unrelated_objects_survive(instance):
    other = _obj("ConfigMap", "openshift-config-managed", "grafana-dashboard-other")
    rule_elsewhere = _obj("PrometheusRule", "elsewhere", "metric-storage")
    client = KubeClient([*_all_objects(), other, rule_elsewhere])
    delete_dashboard_objects(client, instance)
    assert len(client) == 2
    assert client.exists("ConfigMap", "openshift-config-managed", "grafana-dashboard-other")
    assert client.exists("PrometheusRule", "elsewhere", "metric-storage")


def test_objects_being_deleted_are_left_alone(instance):
    terminating = _obj(
        "PrometheusRule",
        "openstack",
        "metric-storage",
        deletionTimestamp="2024-01-01T00:00:00Z",
    )
    client = KubeClient([terminating])
    assert delete_dashboard_objects(client, instance) == []
    assert client.exists("PrometheusRule", "openstack", "metric-storage")


def test_second_run_deletes_nothing(instance):
    client = KubeClient(_all_objects())
    first = delete_dashboard_objects(client, instance)
    assert len(first) == 7
    assert delete_dashboard_objects(client, instance) == []