# src/mongodb_client/operations.py
# Single-document write executed over an already connected client

from typing import Any, Dict

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult

from errors import DocumentWriteError
from logger import get_logger
from metrics import DOCUMENTS_INSERTED_TOTAL

logger = get_logger(__name__)

SUCCESS_NOTICE = "[INFO] Inserted document via SSL/TLS"


def insert_document(
    client: MongoClient,
    database: str,
    collection: str,
    document: Dict[str, Any],
) -> InsertOneResult:
    """
    Insert one document and print the success notice.

    The driver adds an `_id` to the dict it is given, so a shallow copy is
    sent and the caller's mapping is left untouched.

    Args:
        client: Connected client
        database: Target database name
        collection: Target collection name
        document: Key/value payload

    Returns:
        The driver's InsertOneResult (acknowledged write)

    Raises:
        DocumentWriteError: Server-side rejection (duplicate key, validation)
                            or connection lost mid-write
    """
    try:
        result = client[database][collection].insert_one(dict(document))
    except PyMongoError as e:
        logger.error(f"Insert into {database}.{collection} failed: {e}")
        raise DocumentWriteError(f"Insert into {database}.{collection} failed: {e}") from e

    DOCUMENTS_INSERTED_TOTAL.inc()
    logger.info(f"Document inserted: namespace={database}.{collection}, inserted_id={result.inserted_id}")
    print(SUCCESS_NOTICE)
    return result
