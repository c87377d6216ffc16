"""Builders for OpenStack telemetry Kubernetes manifests and an in-memory object store."""

__version__ = "0.1.0"