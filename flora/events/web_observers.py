"""Web-facing observer for user notices.

Subscribes to the GLOBAL_EVENT_BUS for notice.success / notice.error and keeps
a bounded in-memory buffer of recent notices that clients poll through
GET /api/notifications?since=<cursor>.

Each notice gets an auto-increment id (cursor) so clients only fetch newer
ones. The buffer is per-process and guarded by a Lock.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from flora.utilities.constants import MAX_NOTICES
from .Event_Bus import GLOBAL_EVENT_BUS, NOTICE_SUCCESS, NOTICE_ERROR

logger = logging.getLogger(__name__)

_lock = Lock()
_notices: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    payload = payload if isinstance(payload, dict) else {'message': str(payload)}
    with _lock:
        _notices.append({
            'id': _next_id,
            'type': 'error' if event_name == NOTICE_ERROR else 'success',
            'title': payload.get('title', ''),
            'message': payload.get('message', ''),
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        })
        _next_id += 1
        if len(_notices) > MAX_NOTICES:
            del _notices[: len(_notices) - MAX_NOTICES]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(NOTICE_SUCCESS, _record)
    GLOBAL_EVENT_BUS.subscribe(NOTICE_ERROR, _record)
    _started = True
    logger.debug("Notice observers subscribed")


def get_notices(since: int | None = None) -> Dict[str, Any]:
    """Return notices newer than 'since' (exclusive), plus next_cursor for the next poll."""
    with _lock:
        if since is None:
            data = list(_notices)
        else:
            data = [n for n in _notices if n['id'] > since]
        next_cursor = _notices[-1]['id'] if _notices else since or 0
    return {'notices': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_notices']
