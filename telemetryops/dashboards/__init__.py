"""Grafana dashboard helpers and the VM dashboard, shipped as console config maps."""