# src/trust_store/__init__.py
# Trust store loading: keystore file -> trusted CA certificates

from trust_store.loader import (
    TrustMaterial,
    load_trust_store,
    save_pkcs12_trust_store,
)

__all__ = [
    "TrustMaterial",
    "load_trust_store",
    "save_pkcs12_trust_store",
]
