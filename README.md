# telemetryops

Builders for the Kubernetes objects behind OpenStack telemetry. Each builder
takes a plain description of a metric storage deployment and returns the
manifest as ordinary Python dictionaries, ready to be serialised to JSON or
YAML.

## The model

`telemetryops.model` holds dataclasses describing a metric storage instance:
`MetricStorage` (name, namespace and spec), `MonitoringStackSpec`,
`StorageSpec`, `PersistentStorage`, `CustomMonitoringStack` and
`PrometheusTLS`, whose `enabled()` is true when a TLS secret name is set.
Shared names, ports and defaults live in `telemetryops.constants`.

## What it builds

- `telemetryops.monitoring_stack.monitoring_stack(instance, labels)` – a
  `MonitoringStack` resource. It raises `ValueError` when the instance has no
  monitoring stack. `pvc_spec(instance)` returns the persistent volume claim
  spec when the storage strategy is `persistent` (the request defaults to
  `20G`) and `None` otherwise; `parse_quantity(text)` checks a resource
  quantity and raises `ValueError` for a malformed one.
- `telemetryops.scrape_config.scrape_config(instance, labels, targets, tls_enabled)`
  – a `ScrapeConfig`. Targets may be plain address strings (one static config,
  sorted) or `LabeledTarget(ip, fqdn)` entries (one static config each, sorted
  by address and labelled with `fqdn`). The scrape interval comes from the
  monitoring stack, then the custom monitoring stack, then `30s`. With TLS the
  scheme is `HTTPS` and the CA bundle secret is referenced.
- `telemetryops.prometheus_rules.dashboard_prometheus_rule(instance, labels)`
  – a `PrometheusRule` with the node-exporter and Ceilometer recording rules
  the dashboards rely on.
- `telemetryops.dashboard_datasource.dashboard_datasource_data(client, instance, datasource_name, namespace)`
  – the data of the console datasource config map; with TLS enabled the CA
  is read from the instance's TLS secret and the URL uses `https`.
- `telemetryops.dashboards.vm.openstack_vm(ds_name)` – the config map holding
  the Grafana dashboard for virtual machines (CPU, memory, disk and network
  panels), assembled from the helpers in `telemetryops.dashboards.grafana`:
  `datasource_ref`, `grid_pos`, `target`, `graph_panel` and
  `dashboard_config_map`.
- `telemetryops.logging_service.service_manifest(spec, labels)` – the
  LoadBalancer `Service` in front of the log collector, described by a
  `LoggingSpec`; `create_or_update_service(client, spec, labels)` stores it
  and returns it with the `OperationResult`.

## The object store

`telemetryops.kube.KubeClient` is an in-memory store of objects keyed by kind,
namespace and name, with `get`, `create`, `update`, `delete` and `exists`;
`get`, `update` and `delete` raise `NotFoundError` for missing objects.
`object_key` gives an object's (namespace, name). `ensure_deleted` deletes an
object unless it is absent or already being deleted and returns whether a
delete was issued. `create_or_update` applies a mutate function and reports
`CREATED`, `UPDATED` or `NONE`.
`telemetryops.dashboard_objects.delete_dashboard_objects(client, instance)`
removes the recording rules, the datasource and the dashboard config maps of
an instance and returns the (kind, namespace, name) of each object deleted.

## Example

```python
from telemetryops.model import MetricStorage, MonitoringStackSpec, StorageSpec
from telemetryops.monitoring_stack import monitoring_stack

instance = MetricStorage(
    name="metric-storage",
    namespace="openstack",
    monitoring_stack=MonitoringStackSpec(storage=StorageSpec(strategy="ephemeral")),
)
manifest = monitoring_stack(instance, {"service": "metricStorage"})
```

## What it does not do

- It does not connect to a cluster. `KubeClient` keeps objects in memory
  only; applying the manifests is left to the caller.
- It has no controller loop and no command-line tool.
- It does not build the patches that expose the Prometheus and Alertmanager
  services or switch Prometheus to TLS, and the VM dashboard is the only
  Grafana dashboard it ships.

## Tests

```
pip install -e .[test]
pytest
```