import json

import pytest

from telemetryops.dashboards.vm import openstack_vm


def _dashboard(ds_name="metrics-ds"):
    cm = openstack_vm(ds_name)
    return json.loads(cm["data"]["openstack-vm.json"])


def test_config_map_metadata():
    cm = openstack_vm("metrics-ds")
    assert cm["kind"] == "ConfigMap"
    assert cm["metadata"]["name"] == "grafana-dashboard-openstack-vm"
    assert cm["metadata"]["namespace"] == "openshift-config-managed"
    assert cm["metadata"]["labels"] == {"console.openshift.io/dashboard": "true"}
    assert list(cm["data"]) == ["openstack-vm.json"]


def test_dashboard_top_level_fields():
    dash = _dashboard()
    assert dash["title"] == "OpenStack / Ceilometer / VMs"
    assert dash["refresh"] == "10s"
    assert dash["schemaVersion"] == 22
    assert dash["version"] == 18
    assert dash["tags"] == ["openstack-telemetry-operator"]
    assert dash["time"] == {"from": "now-6h", "to": "now"}


def test_panel_titles_in_order():
    titles = [p["title"] for p in _dashboard()["panels"]]
    assert titles == [
        "CPU Utilisation",
        "Memory Utilisation",
        "Disk Space Utilisation",
        "Disk R/W Utilisation",
        "Network Utilisation",
        "Network Saturation (Drop Rate)",
        "Network Error Rate",
    ]


@pytest.mark.parametrize("ds_name", ["metrics-ds", 'odd "name"', "ns-metric-storage"])
def test_datasource_name_used_everywhere(ds_name):
    dash = _dashboard(ds_name)
    refs = [p["datasource"] for p in dash["panels"]]
    refs += [v["datasource"] for v in dash["templating"]["list"]]
    assert refs
    assert all(ref == {"name": ds_name, "type": "prometheus"} for ref in refs)


def test_targets_filter_on_project_and_vm():
    for panel in _dashboard()["panels"]:
        for tgt in panel["targets"]:
            assert tgt["expr"].startswith("vm:ceilometer_")
            assert 'project =~ "$project"' in tgt["expr"]
            assert 'vm_name =~ "$VM"' in tgt["expr"]


def test_ref_ids_unique_within_panel():
    for panel in _dashboard()["panels"]:
        ref_ids = [t["refId"] for t in panel["targets"]]
        assert len(ref_ids) == len(set(ref_ids))


def test_cpu_panel_uses_percent_axis():
    cpu = _dashboard()["panels"][0]
    assert cpu["targets"][0]["expr"] == (
        'vm:ceilometer_cpu:ratio1m{project =~ "$project", vm_name =~ "$VM"}'
    )
    assert cpu["yaxes"][0]["format"] == "percentunit"
    assert cpu["yaxes"][0]["label"] == ""


def test_disk_read_target_has_no_hide_flag():
    disk_rw = _dashboard()["panels"][3]
    read, write = disk_rw["targets"]
    assert "hide" not in read
    assert write["hide"] is False
    assert disk_rw["yaxes"][0]["format"] == "Bps"


def test_template_variables():
    variables = _dashboard()["templating"]["list"]
    assert [v["name"] for v in variables] == ["project", "VM"]
    assert variables[0]["query"] == "label_values(ceilometer_cpu, project)"
    assert variables[1]["query"] == (
        'label_values(vm:ceilometer_cpu:ratio1m{project =~ "$project"}, vm_name)'
    )
    for var in variables:
        assert var["options"][0]["value"] == "$__all"
        selected = [o for o in var["options"] if o["selected"]]
        assert len(selected) == 1
        assert var["current"]["value"] == [selected[0]["value"]]


def test_builds_are_independent():
    first = openstack_vm("a")
    second = openstack_vm("b")
    assert json.loads(first["data"]["openstack-vm.json"])["panels"][0]["datasource"]["name"] == "a"
    assert json.loads(second["data"]["openstack-vm.json"])["panels"][0]["datasource"]["name"] == "b"