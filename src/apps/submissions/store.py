"""MongoDB access for form submissions (read-only)."""

import base64
import logging
import threading
from datetime import UTC, date, datetime
from decimal import Decimal

from bson import Decimal128, ObjectId
from django.conf import settings
from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Return the process-wide MongoDB client, creating it on first use."""
    global _client
    with _lock:
        if _client is None:
            logger.info("Connecting to MongoDB (database=%s)", settings.MONGODB_DATABASE)
            _client = MongoClient(
                settings.MONGODB_URI,
                serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
                tz_aware=True,
            )
        return _client


def get_collection() -> Collection:
    """Return the collection holding contact, enquiry and career submissions."""
    return get_client()[settings.MONGODB_DATABASE][settings.MONGODB_COLLECTION]


def serialize_value(value):
    """Convert BSON values into JSON-safe equivalents."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bytes):
        # bson.Binary is a bytes subclass
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        return {str(key): serialize_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [serialize_value(item) for item in value]
    return value


def list_submissions() -> list[dict]:
    """
    Fetch every submission, newest first.

    Raises whatever the driver raises; callers decide how to report it.
    """
    cursor = get_collection().find({}).sort("createdAt", DESCENDING)
    return [serialize_value(document) for document in cursor]
