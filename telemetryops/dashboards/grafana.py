"""Building blocks for Grafana dashboards shipped as console ConfigMaps."""

from __future__ import annotations

import json

from ..dashboard_objects import DASHBOARD_ARTIFACTS_NAMESPACE

DASHBOARD_LABEL = "console.openshift.io/dashboard"


def datasource_ref(ds_name: str) -> dict:
    """Reference to a Prometheus datasource by name."""
    return {"name": ds_name, "type": "prometheus"}


def grid_pos(h: int, w: int, x: int, y: int) -> dict:
    """Position and size of a panel on the dashboard grid."""
    return {"h": h, "w": w, "x": x, "y": y}


def target(
    expr: str, ref_id: str, legend_format: str = "", hide: bool | None = False
) -> dict:
    """A query target; ``hide=None`` leaves the hide flag out."""
    result: dict = {"expr": expr}
    if hide is not None:
        result["hide"] = hide
    result.update({"interval": "", "legendFormat": legend_format, "refId": ref_id})
    return result


def _axis(fmt: str) -> dict:
    return {
        "format": fmt,
        "label": None,
        "logBase": 1,
        "max": None,
        "min": None,
        "show": True,
    }


def graph_panel(
    ds_name: str, panel_id: int, title: str, grid: dict, targets: list, **kwargs
) -> dict:
    """A time-series graph panel.

    ``y_format`` sets the unit of the left y axis (default "short"); any
    other keyword replaces or adds the panel field of that name.
    """
    y_format = kwargs.pop("y_format", "short")
    panel: dict = {
        "aliasColors": {},
        "bars": False,
        "dashLength": 10,
        "dashes": False,
        "datasource": datasource_ref(ds_name),
        "fill": 10,
        "fillGradient": 0,
        "gridPos": dict(grid),
        "hiddenSeries": False,
        "id": panel_id,
        "legend": {
            "avg": False,
            "current": False,
            "max": False,
            "min": False,
            "show": True,
            "total": False,
            "values": False,
        },
        "lines": True,
        "linewidth": 1,
        "nullPointMode": "null",
        "options": {"dataLinks": []},
        "percentage": False,
        "pointradius": 2,
        "points": False,
        "renderer": "flot",
        "seriesOverrides": [],
        "spaceLength": 10,
        "stack": False,
        "steppedLine": False,
        "targets": list(targets),
        "thresholds": [],
        "timeFrom": None,
        "timeRegions": [],
        "timeShift": None,
        "title": title,
        "tooltip": {"shared": True, "sort": 0, "value_type": "individual"},
        "type": "graph",
        "xaxis": {
            "buckets": None,
            "mode": "time",
            "name": None,
            "show": True,
            "values": [],
        },
        "yaxes": [_axis(y_format), _axis("short")],
        "yaxis": {"align": False, "alignLevel": None},
    }
    panel.update(kwargs)
    return panel


def dashboard_config_map(name: str, key: str, dashboard: dict) -> dict:
    """Wrap a dashboard in a ConfigMap the console picks up."""
    return {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": {
            "name": name,
            "namespace": DASHBOARD_ARTIFACTS_NAMESPACE,
            "labels": {DASHBOARD_LABEL: "true"},
        },
        "data": {key: json.dumps(dashboard, indent=2)},
    }