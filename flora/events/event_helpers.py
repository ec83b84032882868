"""Event helper utilities.

Helpers for publishing user-facing notices on the global event bus. They
replace the modal alerts of the mobile client: every operation boundary
reports its outcome through one of these.

Quick import:
    from flora.events.event_helpers import notify_success, notify_error
"""
from __future__ import annotations
from .Event_Bus import publish, NOTICE_SUCCESS, NOTICE_ERROR

__all__ = ['notify_success', 'notify_error', 'NOTICE_SUCCESS', 'NOTICE_ERROR']


def notify_success(message: str, title: str = "Success"):
    """Publish a notice.success event."""
    publish(NOTICE_SUCCESS, {'title': title, 'message': message})


def notify_error(message: str, title: str = "Error"):
    """Publish a notice.error event."""
    publish(NOTICE_ERROR, {'title': title, 'message': message})
