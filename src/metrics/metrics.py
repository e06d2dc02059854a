# src/metrics/metrics.py
# Prometheus metrics for the bootstrap flow
# Stage names used as label values: trust_store, tls, connect, insert
# (connect includes the optional preflight handshake)

from prometheus_client import Counter, Gauge, Histogram

# How long each stage took (successful or not)
BOOTSTRAP_STAGE_LATENCY_SECONDS = Histogram(
    "bootstrap_stage_latency_seconds",
    "Latency of each bootstrap stage",
    ["stage"],
)

# Which stage a failed run stopped at
BOOTSTRAP_STAGE_FAILURES_TOTAL = Counter(
    "bootstrap_stage_failures_total",
    "Total number of failed bootstrap stages",
    ["stage"],
)

# Documents acknowledged by the server
DOCUMENTS_INSERTED_TOTAL = Counter(
    "documents_inserted_total",
    "Total number of documents inserted",
)

# Clients created and not yet closed; back at 0 after every run
MONGODB_CLIENTS_OPEN = Gauge(
    "mongodb_clients_open",
    "Number of MongoDB clients currently open",
)
