# src/errors/exceptions.py
# Errors raised by each stage of the secure client bootstrap
#
# The taxonomy is flat: every error is fatal and nothing is retried.
# Each class records the stage it belongs to so the entry point (and metrics)
# can tell where the run stopped.

from typing import Optional


class BootstrapError(Exception):
    """
    Base class for all bootstrap failures.

    Attributes:
        stage: Name of the stage that failed (trust_store, tls, connect, insert)
    """

    stage = "bootstrap"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class TrustStoreIOError(BootstrapError):
    """Trust store file is missing or cannot be read."""

    stage = "trust_store"


class TrustStoreFormatError(BootstrapError):
    """Trust store file is not a keystore we can decode, or holds no certificates."""

    stage = "trust_store"


class TrustStorePasswordError(BootstrapError):
    """Trust store is a PKCS#12 container but the password does not open it."""

    stage = "trust_store"


class TLSConfigError(BootstrapError):
    """The TLS provider rejected the trust material or the protocol settings."""

    stage = "tls"


class DatabaseConnectionError(BootstrapError):
    """
    Could not get a live client: network unreachable, TLS handshake failure,
    server selection timeout or an invalid connection URI.
    """

    stage = "connect"


class DatabaseAuthError(DatabaseConnectionError):
    """The server rejected the credentials in the connection URI."""


class DocumentWriteError(BootstrapError):
    """The server rejected the insert or the connection was lost mid-write."""

    stage = "insert"
