import pytest

from telemetryops.dashboard_datasource import dashboard_datasource_data
from telemetryops.kube import KubeClient, NotFoundError
from telemetryops.model import MetricStorage, PrometheusTLS


def _secret(data):
    return {
        "kind": "Secret",
        "metadata": {"name": "prom-cert", "namespace": "monitoring"},
        "data": data,
    }


@pytest.fixture
def plain():
    return MetricStorage(name="metric-storage", namespace="monitoring")


@pytest.fixture
def with_tls():
    return MetricStorage(
        name="metric-storage",
        namespace="monitoring",
        prometheus_tls=PrometheusTLS(secret_name="prom-cert"),
    )


def test_keys(plain):
    data = dashboard_datasource_data(KubeClient(), plain, "ds", "console")
    assert set(data) == {"dashboard-datasource-ca", "dashboard-datasource.yaml"}


def test_plain_http(plain):
    data = dashboard_datasource_data(KubeClient(), plain, "my-ds", "console-ns")
    text = data["dashboard-datasource.yaml"]
    assert data["dashboard-datasource-ca"] == ""
    assert 'name: "my-ds"' in text
    assert 'project: "console-ns"' in text
    assert 'direct_url: "http://metric-storage-prometheus.monitoring.svc.cluster.local:9090"' in text


def test_yaml_indented_with_spaces(plain):
    text = dashboard_datasource_data(KubeClient(), plain, "ds", "ns")["dashboard-datasource.yaml"]
    assert "\t" not in text
    assert text.startswith("\n")
    assert text.endswith("\n")


def test_tls_reads_ca(with_tls):
    client = KubeClient([_secret({"ca.crt": "CERTDATA"})])
    data = dashboard_datasource_data(client, with_tls, "ds", "ns")
    assert data["dashboard-datasource-ca"] == "CERTDATA"
    assert '"https://metric-storage-prometheus.' in data["dashboard-datasource.yaml"]


def test_tls_ca_bytes_decoded(with_tls):
    client = KubeClient([_secret({"ca.crt": b"BYTES-CA"})])
    data = dashboard_datasource_data(client, with_tls, "ds", "ns")
    assert data["dashboard-datasource-ca"] == "BYTES-CA"


def test_tls_secret_without_ca(with_tls):
    client = KubeClient([_secret({})])
    assert dashboard_datasource_data(client, with_tls, "ds", "ns")["dashboard-datasource-ca"] == ""


def test_tls_missing_secret(with_tls):
    with pytest.raises(NotFoundError):
        dashboard_datasource_data(KubeClient(), with_tls, "ds", "ns")