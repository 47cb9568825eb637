"""
SheetsProjects API - Event Logger

Audit trail of policy page fetches (collection: event_log).
Single function to call from any route/service.

Best-effort: a database error is logged, never raised, a page must still
be served when MongoDB is down.
"""

import logging
import uuid
import config
from config import db, now_iso

logger = logging.getLogger("event_logger")


async def log_event(
    action: str,
    entity_type: str,
    entity_id: str,
    details: dict = None
):
    """
    Write a single event to the event_log collection.

    Args:
        action: e.g. policy_doc_fetch, policy_doc_fetch_failed
        entity_type: policy_doc
        entity_id: ID of the primary entity (policy type)
        details: free-form dict (document_id, error, revision, etc.)

    Returns the stored event, or None when disabled or on failure.
    """
    if not config.EVENT_LOG_ENABLED:
        return None

    event = {
        "id": str(uuid.uuid4()),
        "action": action,
        "entity_type": entity_type,
        "entity_id": entity_id,
        "details": details or {},
        "created_at": now_iso()
    }

    try:
        await db.event_log.insert_one(dict(event))
    except Exception as e:
        logger.error(f"event_log insert failed ({action} {entity_type}/{entity_id}): {str(e)}")
        return None

    return event


async def ensure_indexes():
    """Index event_log (appelé au démarrage)"""
    await db.event_log.create_index("created_at")
    await db.event_log.create_index([("entity_type", 1), ("entity_id", 1)])
