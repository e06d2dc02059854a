# src/tls_context/builder.py
# TLS context builder
# Turns trust material into a client-side TLS context that authenticates the
# server against those certificates only. No client certificate is loaded
# (server authentication only, no mutual TLS) and the system CA store is not used.

import ssl
from dataclasses import dataclass

from errors import TLSConfigError
from logger import get_logger
from trust_store import TrustMaterial

logger = get_logger(__name__)

_TLS_VERSIONS = {
    "TLSv1.2": ssl.TLSVersion.TLSv1_2,
    "TLSv1.3": ssl.TLSVersion.TLSv1_3,
}


@dataclass(frozen=True)
class TLSContext:
    """
    A ready-to-use client TLS context.

    Attributes:
        ssl_context: Context used to wrap sockets (CERT_REQUIRED, our CAs only)
        ca_pem: The same trust anchors as a PEM bundle, for the MongoDB driver
        check_hostname: Whether the server name is matched against its certificate
        minimum_version: Lowest protocol version accepted
    """
    ssl_context: ssl.SSLContext
    ca_pem: str
    check_hostname: bool
    minimum_version: str


def build_tls_context(
    material: TrustMaterial,
    minimum_version: str = "TLSv1.2",
    check_hostname: bool = True,
) -> TLSContext:
    """
    Build a TLS context that trusts exactly the given certificates.

    Args:
        material: Loaded trust store
        minimum_version: "TLSv1.2" or "TLSv1.3"
        check_hostname: Match the server certificate against the dialed host name

    Returns:
        TLSContext

    Raises:
        TLSConfigError: Unknown protocol version, or the TLS provider rejects
                        the trust material
    """
    if minimum_version not in _TLS_VERSIONS:
        raise TLSConfigError(
            f"Unsupported minimum TLS version {minimum_version!r}, "
            f"expected one of {', '.join(_TLS_VERSIONS)}"
        )

    ca_pem = material.to_pem()

    try:
        # PROTOCOL_TLS_CLIENT starts with CERT_REQUIRED and hostname checking on,
        # and no CA loaded until we load ours
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.minimum_version = _TLS_VERSIONS[minimum_version]
        context.check_hostname = check_hostname
        context.verify_mode = ssl.CERT_REQUIRED
        context.load_verify_locations(cadata=ca_pem)
    except (ssl.SSLError, ValueError) as e:
        logger.error(f"TLS provider rejected the trust material from {material.source}: {e}")
        raise TLSConfigError(f"Cannot build TLS context: {e}") from e

    logger.info(
        f"TLS context ready: min_version={minimum_version}, "
        f"check_hostname={check_hostname}, trust_anchors={len(material)}"
    )

    return TLSContext(
        ssl_context=context,
        ca_pem=ca_pem,
        check_hostname=check_hostname,
        minimum_version=minimum_version,
    )
