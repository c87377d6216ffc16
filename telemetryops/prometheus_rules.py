"""Recording rules that feed the node and VM console dashboards."""

from __future__ import annotations

from .model import MetricStorage

_DISK_DEVICES = 'device=~"mmcblk.p.+|nvme.+|sd.+|vd.+|xvd.+|dm-.+|dasd.+"'
_VM_NAME = 'label_replace({inner}, "vm_name", "$1", "resource_name", "(.*):.*")'
_DISK_DEVICE = 'label_replace({inner}, "device", "$1", "resource", ".*-.*-.*-.*-.*-(.*)")'
_NET_DEVICE = 'label_replace({inner}, "device", "$1", "resource_name", ".*:(.*)")'

_NODE_RULES = (
    (
        "instance:node_num_cpu:sum",
        'count without (cpu, mode) (node_cpu_seconds_total{mode="idle"})',
    ),
    (
        "instance:node_cpu_utilisation:rate1m",
        "1 - avg without (cpu) (sum without (mode) "
        '(rate(node_cpu_seconds_total{mode=~"idle|iowait|steal"}[1m])))',
    ),
    (
        "instance:node_load1_per_cpu:ratio",
        "(node_load1 / instance:node_num_cpu:sum)",
    ),
    (
        "instance:node_memory_utilisation:ratio",
        "1 - ( ( node_memory_MemAvailable_bytes or ( node_memory_Buffers_bytes + "
        "node_memory_Cached_bytes + node_memory_MemFree_bytes + node_memory_Slab_bytes ) )"
        " / node_memory_MemTotal_bytes )",
    ),
    (
        "instance:node_vmstat_pgmajfault:rate1m",
        "rate(node_vmstat_pgmajfault[1m])",
    ),
    (
        "instance_device:node_disk_io_time_seconds:rate1m",
        f"rate(node_disk_io_time_seconds_total{{{_DISK_DEVICES}}}[1m])",
    ),
    (
        "instance_device:node_disk_io_time_weighted_seconds:rate1m",
        f"rate(node_disk_io_time_weighted_seconds_total{{{_DISK_DEVICES}}}[1m])",
    ),
    *(
        (
            f"instance:node_network_{metric}_excluding_lo:rate1m",
            f'sum without (device) ( rate(node_network_{metric}_total{{device!="lo"}}[1m]) )',
        )
        for metric in ("receive_bytes", "transmit_bytes", "receive_drop", "transmit_drop")
    ),
)


def _vm(inner: str) -> str:
    return _VM_NAME.format(inner=inner)


def _ceilometer_rules() -> tuple[tuple[str, str], ...]:
    rules = [
        (
            "vm:ceilometer_cpu:ratio1m",
            "sum without(unit, type) ("
            + _vm("rate(ceilometer_cpu[1m])")
            + " / 1000000000)",
        ),
        (
            "vm:ceilometer_memory_usage:total",
            "sum without(type) (" + _vm("ceilometer_memory_usage") + " * 1024 * 1024)",
        ),
        (
            "vm:ceilometer_disk_device_usage:total",
            "sum without(type) ("
            + _vm(_DISK_DEVICE.format(inner="ceilometer_disk_device_usage"))
            + ")",
        ),
    ]
    for metric in ("read_bytes", "write_bytes"):
        rules.append(
            (
                f"vm:ceilometer_disk_device_{metric}:rate1m",
                "sum without(type) ("
                + _vm(_DISK_DEVICE.format(inner=f"rate(ceilometer_disk_device_{metric}[1m])"))
                + ")",
            )
        )
    for metric in (
        "outgoing_bytes",
        "incoming_bytes",
        "outgoing_packets_drop",
        "incoming_packets_drop",
        "incoming_packets_error",
        "outgoing_packets_error",
    ):
        rules.append(
            (
                f"vm:ceilometer_network_{metric}:rate1m",
                "sum without(type) ("
                + _vm(_NET_DEVICE.format(inner=f"rate(ceilometer_network_{metric}[1m])"))
                + ")",
            )
        )
    return tuple(rules)


_CEILOMETER_RULES = _ceilometer_rules()

_GROUPS = (
    ("osp-node-exporter-dashboard.rules", _NODE_RULES),
    ("osp-ceilometer-dashboard.rules", _CEILOMETER_RULES),
)


def dashboard_prometheus_rule(instance: MetricStorage, labels: dict) -> dict:
    """Build the PrometheusRule holding the dashboards' recording rules."""
    return {
        "apiVersion": "monitoring.rhobs/v1",
        "kind": "PrometheusRule",
        "metadata": {
            "name": instance.name,
            "namespace": instance.namespace,
            "labels": dict(labels),
        },
        "spec": {
            "groups": [
                {
                    "name": group_name,
                    "rules": [{"expr": expr, "record": record} for record, expr in rules],
                }
                for group_name, rules in _GROUPS
            ],
        },
    }