# src/service/bootstrap.py
# The secure client bootstrap, end to end:
#   trust store -> TLS context -> connect -> insert one document -> close
#
# Nothing here catches an error to recover from it. A failure is counted
# against the stage it happened in and re-raised unchanged.

import time
from contextlib import contextmanager
from typing import Callable, Optional

from pymongo import MongoClient
from pymongo.results import InsertOneResult

from config import Settings, settings as default_settings
from errors import BootstrapError
from logger import get_logger
from metrics import BOOTSTRAP_STAGE_FAILURES_TOTAL, BOOTSTRAP_STAGE_LATENCY_SECONDS
from mongodb_client import connect, insert_document
from tls_context import build_tls_context
from tracking import run_context
from trust_store import load_trust_store

logger = get_logger(__name__)


@contextmanager
def _stage(name: str):
    """Record how long a stage took, whether it succeeded or not."""
    start = time.perf_counter()
    try:
        yield
    finally:
        BOOTSTRAP_STAGE_LATENCY_SECONDS.labels(stage=name).observe(time.perf_counter() - start)


def run_bootstrap(
    settings: Optional[Settings] = None,
    client_factory: Callable[..., MongoClient] = MongoClient,
) -> InsertOneResult:
    """
    Load the trust store, build the TLS context, connect and insert one document.

    The TLS context is complete before any client exists, and the client is
    closed before this function returns or raises.

    Args:
        settings: Configuration to use; defaults to the global settings
        client_factory: Creates the MongoDB client (pymongo.MongoClient);
                        tests pass a fake

    Returns:
        InsertOneResult of the single insert

    Raises:
        BootstrapError: Any stage failure (see errors.exceptions)
    """
    settings = settings or default_settings

    with run_context() as run_id:
        logger.info(f"Starting secure client bootstrap: run_id={run_id}")
        try:
            with _stage("trust_store"):
                material = load_trust_store(
                    settings.trust_store.path, settings.trust_store.password
                )

            with _stage("tls"):
                tls_context = build_tls_context(
                    material,
                    minimum_version=settings.tls.minimum_version,
                    check_hostname=settings.tls.check_hostname,
                )

            with connect(
                tls_context,
                settings.mongodb.uri,
                connect_timeout_ms=settings.mongodb.connect_timeout_ms,
                server_selection_timeout_ms=settings.mongodb.server_selection_timeout_ms,
                preflight=settings.tls.preflight,
                client_factory=client_factory,
            ) as client:
                with _stage("insert"):
                    result = insert_document(
                        client,
                        settings.mongodb.database,
                        settings.mongodb.collection,
                        settings.mongodb.document,
                    )

        except BootstrapError as e:
            BOOTSTRAP_STAGE_FAILURES_TOTAL.labels(stage=e.stage).inc()
            logger.error(f"Bootstrap failed at stage '{e.stage}': {e}")
            raise

        logger.info("Secure client bootstrap complete")
        return result
