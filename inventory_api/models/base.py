# File: inventory_api/models/base.py

"""
Helpers shared by every stored document.

Documents are plain dicts; each one carries ``createdAt`` / ``updatedAt``
timestamps and is exposed to the API with ``_id`` rendered as ``id``.
"""

from datetime import datetime, timezone

from bson import ObjectId

from inventory_api.core.errors import NotFoundError


def utcnow() -> datetime:
    # BSON dates have millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def new_document(**fields) -> dict:
    now = utcnow()
    return {**fields, "createdAt": now, "updatedAt": now}


def serialize_doc(doc: dict) -> dict:
    d = {**doc}
    if "_id" in d:
        d["id"] = str(d.pop("_id"))
    for k, v in list(d.items()):
        if isinstance(v, ObjectId):
            d[k] = str(v)
        elif isinstance(v, datetime) and v.tzinfo is None:
            # stored dates are UTC even when the driver hands them back naive
            d[k] = v.replace(tzinfo=timezone.utc)
    return d


def parse_object_id(value: str, what: str = "Document") -> ObjectId:
    """
    Convert a path/body id to an ObjectId.

    An id that is not a valid ObjectId cannot resolve to a stored
    document, so it is reported as not found.
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise NotFoundError(f"{what} not found")
    return ObjectId(value)
