# src/service/__init__.py
# Orchestration of the secure client bootstrap

from .bootstrap import run_bootstrap

__all__ = [
    "run_bootstrap",
]
