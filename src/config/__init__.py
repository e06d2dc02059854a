# src/config/__init__.py
# Exports the global settings object and the dataclasses used to build
# custom settings (for example in tests)

from .settings import (
    settings,
    Settings,
    TrustStoreConfig,
    TLSConfig,
    MongoDBConfig,
    AppConfig,
)

__all__ = [
    "settings",
    "Settings",
    "TrustStoreConfig",
    "TLSConfig",
    "MongoDBConfig",
    "AppConfig",
]
