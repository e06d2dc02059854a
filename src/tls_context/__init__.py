# src/tls_context/__init__.py
# TLS context construction from trust material, plus a handshake probe

from tls_context.builder import TLSContext, build_tls_context
from tls_context.preflight import probe_server

__all__ = [
    "TLSContext",
    "build_tls_context",
    "probe_server",
]
