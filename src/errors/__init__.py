# src/errors/__init__.py
# Exception taxonomy for the bootstrap flow
# One class per stage failure: trust store, TLS, connect, insert

from .exceptions import (
    BootstrapError,
    TrustStoreIOError,
    TrustStoreFormatError,
    TrustStorePasswordError,
    TLSConfigError,
    DatabaseConnectionError,
    DatabaseAuthError,
    DocumentWriteError,
)

__all__ = [
    "BootstrapError",
    "TrustStoreIOError",
    "TrustStoreFormatError",
    "TrustStorePasswordError",
    "TLSConfigError",
    "DatabaseConnectionError",
    "DatabaseAuthError",
    "DocumentWriteError",
]
