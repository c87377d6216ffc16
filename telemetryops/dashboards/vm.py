"""Console dashboard with per-VM resource usage from Ceilometer metrics."""

from __future__ import annotations

from .grafana import (
    dashboard_config_map,
    datasource_ref,
    graph_panel,
    grid_pos,
    target,
)

CONFIG_MAP_NAME = "grafana-dashboard-openstack-vm"
DASHBOARD_KEY = "openstack-vm.json"
DASHBOARD_TITLE = "OpenStack / Ceilometer / VMs"

_REFRESH_INTERVALS = ["5s", "10s", "30s", "1m", "5m", "15m", "30m", "1h", "2h", "1d"]

# Sample selections stored with the dashboard; they only pre-fill the pickers.
_SAMPLE_PROJECTS = ("example-project-1", "example-project-2")
_SAMPLE_VMS = ("example-vm-1", "example-vm-2")


def _selector(record: str) -> str:
    return f'vm:ceilometer_{record}{{project =~ "$project", vm_name =~ "$VM"}}'


def _cpu_axes() -> list:
    return [
        {
            "decimals": None,
            "format": "percentunit",
            "label": "",
            "logBase": 1,
            "max": None,
            "min": None,
            "show": True,
        },
        {
            "format": "short",
            "label": "",
            "logBase": 1,
            "max": None,
            "min": None,
            "show": True,
        },
    ]


def _panels(ds_name: str) -> list:
    vm_legend = "{{vm_name}}"
    return [
        graph_panel(
            ds_name, 2, "CPU Utilisation", grid_pos(9, 12, 0, 0),
            [target(_selector("cpu:ratio1m"), "A", vm_legend)],
            yaxes=_cpu_axes(),
        ),
        graph_panel(
            ds_name, 4, "Memory Utilisation", grid_pos(9, 12, 12, 0),
            [target(_selector("memory_usage:total"), "A", vm_legend)],
            y_format="bytes",
        ),
        graph_panel(
            ds_name, 6, "Disk Space Utilisation", grid_pos(8, 12, 0, 9),
            [
                target(
                    _selector("disk_device_usage:total"), "A",
                    "{{vm_name}}({{device}})",
                )
            ],
            y_format="bytes",
        ),
        graph_panel(
            ds_name, 8, "Disk R/W Utilisation", grid_pos(8, 12, 12, 9),
            [
                target(
                    _selector("disk_device_read_bytes:rate1m"), "A",
                    "{{vm_name}} read ({{device}})", hide=None,
                ),
                target(
                    _selector("disk_device_write_bytes:rate1m"), "B",
                    "{{vm_name}} write ({{device}})",
                ),
            ],
            y_format="Bps",
        ),
        graph_panel(
            ds_name, 10, "Network Utilisation", grid_pos(8, 12, 0, 17),
            [
                target(
                    _selector("network_incoming_bytes:rate1m"), "B",
                    "{{vm_name}} in ({{device}})",
                ),
                target(
                    _selector("network_outgoing_bytes:rate1m"), "A",
                    "{{vm_name}} out ({{device}})",
                ),
            ],
            y_format="Bps",
        ),
        graph_panel(
            ds_name, 12, "Network Saturation (Drop Rate)", grid_pos(8, 12, 12, 17),
            [
                target(
                    _selector("network_incoming_packets_drop:rate1m"), "A",
                    "{{vm_name}} in ({{device}})",
                ),
                target(
                    _selector("network_outgoing_packets_drop:rate1m"), "B",
                    "{{vm_name}} out ({{device}})",
                ),
            ],
        ),
        graph_panel(
            ds_name, 12, "Network Error Rate", grid_pos(8, 12, 12, 17),
            [
                target(
                    _selector("network_incoming_packets_error:rate1m"), "A",
                    "{{vm_name}} in ({{device}})",
                ),
                target(
                    _selector("network_outgoing_packets_error:rate1m"), "B",
                    "{{vm_name}} out ({{device}})",
                ),
            ],
        ),
    ]


def _options(values: tuple) -> list:
    selected, *others = values
    return [
        {"selected": False, "text": "All", "value": "$__all"},
        {"selected": True, "text": selected, "value": selected},
        *({"selected": False, "text": v, "value": v} for v in others),
    ]


def _variable(
    ds_name: str, name: str, current: dict, definition: str, query: str,
    values: tuple, sort: int,
) -> dict:
    return {
        "allValue": ".*",
        "current": current,
        "datasource": datasource_ref(ds_name),
        "definition": definition,
        "hide": 0,
        "includeAll": True,
        "index": -1,
        "label": None,
        "multi": True,
        "name": name,
        "options": _options(values),
        "query": query,
        "refresh": 0,
        "regex": "",
        "skipUrlSync": False,
        "sort": sort,
        "tagValuesQuery": "",
        "tags": [],
        "tagsQuery": "",
        "type": "query",
        "useTags": False,
    }


def _templating(ds_name: str) -> dict:
    project_query = "label_values(ceilometer_cpu, project)"
    project = _variable(
        ds_name, "project",
        {"tags": [], "text": _SAMPLE_PROJECTS[0], "value": [_SAMPLE_PROJECTS[0]]},
        project_query, project_query, _SAMPLE_PROJECTS, 1,
    )
    vm = _variable(
        ds_name, "VM",
        {
            "selected": False,
            "tags": [],
            "text": _SAMPLE_VMS[0],
            "value": [_SAMPLE_VMS[0]],
        },
        'label_values(ceilometer_cpu{project =~ "$project"}, vm_instance)',
        'label_values(vm:ceilometer_cpu:ratio1m{project =~ "$project"}, vm_name)',
        _SAMPLE_VMS, 0,
    )
    return {"list": [project, vm]}


def _dashboard(ds_name: str) -> dict:
    return {
        "annotations": {
            "list": [
                {
                    "builtIn": 1,
                    "datasource": "-- Grafana --",
                    "enable": True,
                    "hide": True,
                    "iconColor": "rgba(0, 211, 255, 1)",
                    "name": "Annotations & Alerts",
                    "type": "dashboard",
                }
            ]
        },
        "editable": True,
        "gnetId": None,
        "graphTooltip": 0,
        "id": 1,
        "iteration": 1711654297335,
        "links": [],
        "panels": _panels(ds_name),
        "refresh": "10s",
        "schemaVersion": 22,
        "style": "dark",
        "tags": ["openstack-telemetry-operator"],
        "templating": _templating(ds_name),
        "time": {"from": "now-6h", "to": "now"},
        "timepicker": {"refresh_intervals": list(_REFRESH_INTERVALS)},
        "timezone": "",
        "title": DASHBOARD_TITLE,
        "variables": {"list": []},
        "version": 18,
    }


def openstack_vm(ds_name: str) -> dict:
    """Build the ConfigMap holding the OpenStack VM dashboard."""
    return dashboard_config_map(CONFIG_MAP_NAME, DASHBOARD_KEY, _dashboard(ds_name))