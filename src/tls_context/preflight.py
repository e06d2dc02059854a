# src/tls_context/preflight.py
# One-shot TLS handshake against a server using our own TLS context.
# Run before the driver connects so that an untrusted or mismatched server
# certificate is reported against the custom trust store.

import socket
import ssl

from errors import DatabaseConnectionError
from logger import get_logger
from tls_context.builder import TLSContext

logger = get_logger(__name__)


def probe_server(tls_context: TLSContext, host: str, port: int, timeout: float = 10.0) -> str:
    """
    Open a TCP connection, complete a TLS handshake and close it again.

    Args:
        tls_context: Context whose trust anchors validate the server
        host: Server host name (also sent as SNI and used for hostname checks)
        port: Server port
        timeout: Seconds allowed for connect and handshake

    Returns:
        The server certificate subject, e.g. "CN=localhost"

    Raises:
        DatabaseConnectionError: Unreachable host, handshake failure or
                                 certificate not trusted
    """
    logger.info(f"TLS preflight: host={host}, port={port}")

    try:
        with socket.create_connection((host, port), timeout=timeout) as sock:
            with tls_context.ssl_context.wrap_socket(sock, server_hostname=host) as tls_sock:
                peer = tls_sock.getpeercert()
                version = tls_sock.version()
    except ssl.SSLCertVerificationError as e:
        logger.error(f"Server certificate of {host}:{port} rejected: {e.verify_message}")
        raise DatabaseConnectionError(
            f"Server certificate of {host}:{port} rejected by trust store: {e.verify_message}"
        ) from e
    except (ssl.SSLError, OSError) as e:
        logger.error(f"TLS handshake with {host}:{port} failed: {e}")
        raise DatabaseConnectionError(f"TLS handshake with {host}:{port} failed: {e}") from e

    subject = ", ".join(
        f"{name}={value}" for rdn in peer.get("subject", ()) for name, value in rdn
    )
    logger.info(f"TLS preflight ok: host={host}, version={version}, subject={subject}")
    return subject
