[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telemetryops"
version = "0.1.0"
description = "Builders for the Kubernetes manifests of OpenStack telemetry: monitoring stacks, scrape configs, recording rules, dashboard datasources and Grafana dashboards."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "openstack", "telemetry", "prometheus", "grafana", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["telemetryops"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
