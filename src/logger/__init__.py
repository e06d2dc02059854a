# src/logger/__init__.py
# Centralized logging setup for the whole program
# Named 'logger' instead of 'logging' to avoid clashing with the standard library module

from .logging import setup_logging, get_logger, RunIDFilter

__all__ = [
    "setup_logging",
    "get_logger",
    "RunIDFilter",
]
