# src/tracking/run_id.py
# Run id of the bootstrap currently executing.
# run_bootstrap() opens one scope per call; the logging filter reads the id
# so every record of that run carries the same tag.

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def get_run_id() -> Optional[str]:
    """Run id of the current scope, or None outside of a run."""
    return _run_id.get()


@contextmanager
def run_context(run_id: Optional[str] = None) -> Generator[str, None, None]:
    """
    Tag everything executed inside the block with a run id.

    A new "run-<16 hex>" id is generated unless one is given. Leaving the
    block restores whatever id was active before, so scopes nest.

    Example:
        with run_context() as rid:
            logger.info("loading trust store")  # logged with [rid]
    """
    if run_id is None:
        run_id = f"run-{uuid.uuid4().hex[:16]}"
    token = _run_id.set(run_id)
    try:
        yield run_id
    finally:
        _run_id.reset(token)
