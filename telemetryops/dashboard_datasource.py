"""Console dashboard datasource definition for a MetricStorage instance."""

from __future__ import annotations

from .kube import KubeClient
from .model import MetricStorage


def _ca_text(client: KubeClient, instance: MetricStorage) -> str:
    secret = client.get(
        "Secret", instance.namespace, instance.prometheus_tls.secret_name or ""
    )
    value = (secret.get("data") or {}).get("ca.crt", "")
    if isinstance(value, bytes):
        return value.decode()
    return value


def dashboard_datasource_data(
    client: KubeClient, instance: MetricStorage, datasource_name: str, namespace: str
) -> dict[str, str]:
    """Return the ConfigMap data describing the Prometheus datasource.

    With TLS enabled the CA is read from the TLS secret; a missing secret
    raises NotFoundError.
    """
    scheme = "http"
    cert_text = ""
    if instance.prometheus_tls.enabled():
        scheme = "https"
        cert_text = _ca_text(client, instance)

    # YAML: indentation must be spaces.
    yaml_text = (
        "\n"
        'kind: "Datasource"\n'
        "metadata:\n"
        f'    name: "{datasource_name}"\n'
        f'    project: "{namespace}"\n'
        "spec:\n"
        "    plugin:\n"
        '        kind: "PrometheusDatasource"\n'
        "        spec:\n"
        f'            direct_url: "{scheme}://metric-storage-prometheus.'
        f'{instance.namespace}.svc.cluster.local:9090"\n'
    )
    return {
        "dashboard-datasource-ca": cert_text,
        "dashboard-datasource.yaml": yaml_text,
    }