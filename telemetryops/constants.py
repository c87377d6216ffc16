"""Names, ports and defaults shared across the telemetry resources."""

# Telemetry service
TELEMETRY_SERVICE_NAME = "telemetry"
TELEMETRY_SERVICE_TYPE = "telemetry"

# Logging service
LOGGING_SERVICE_NAME = "logging"
LOGGING_COMPUTE_SERVICE_NAME = "logging-compute"
LOGGING_SERVICE_TYPE = "Logging"

# Metric storage
RABBITMQ_PROMETHEUS_PORT = 15691
DEFAULT_PVC_STORAGE_REQUEST = "20G"
DEFAULT_SCRAPE_INTERVAL = "30s"
PROMETHEUS_REPLICAS = 1

# Service annotations understood by the control plane
ANNOTATION_ENDPOINT_KEY = "endpoint"
ANNOTATION_INGRESS_CREATE_KEY = "core.openstack.org/ingress_create"
ANNOTATION_INGRESS_TARGET_PORT_NAME_KEY = "core.openstack.org/ingress_target_port_name"
ENDPOINT_PUBLIC = "public"

# Entry names inside TLS secrets
TLS_KEY_ENTRY = "tls.key"
TLS_CERT_KEY = "tls.crt"
TLS_CA_BUNDLE_KEY = "tls-ca-bundle.pem"