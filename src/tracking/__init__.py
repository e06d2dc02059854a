# src/tracking/__init__.py
# Run ids tie together every log line of one bootstrap run:
# trust store load, TLS context, connect, insert and teardown

from tracking.run_id import get_run_id, run_context

__all__ = [
    "get_run_id",
    "run_context",
]
