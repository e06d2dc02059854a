# src/mongodb_client/__init__.py
# MongoDB access over TLS: scoped client bootstrap and the single insert

from mongodb_client.client import (
    connect,
    redact_uri,
    seed_addresses,
)
from mongodb_client.operations import (
    insert_document,
    SUCCESS_NOTICE,
)

__all__ = [
    "connect",
    "redact_uri",
    "seed_addresses",
    "insert_document",
    "SUCCESS_NOTICE",
]
