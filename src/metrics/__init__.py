# src/metrics/__init__.py
# Exports the bootstrap metrics

from .metrics import (
    BOOTSTRAP_STAGE_LATENCY_SECONDS,
    BOOTSTRAP_STAGE_FAILURES_TOTAL,
    DOCUMENTS_INSERTED_TOTAL,
    MONGODB_CLIENTS_OPEN,
)

__all__ = [
    "BOOTSTRAP_STAGE_LATENCY_SECONDS",
    "BOOTSTRAP_STAGE_FAILURES_TOTAL",
    "DOCUMENTS_INSERTED_TOTAL",
    "MONGODB_CLIENTS_OPEN",
]
