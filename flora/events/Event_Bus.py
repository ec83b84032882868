"""Simple Event Bus / Observer implementation for user-facing notices.

Event names used so far:
  notice.success -> payload {"title": str, "message": str}
  notice.error   -> payload {"title": str, "message": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
NOTICE_SUCCESS = "notice.success"
NOTICE_ERROR = "notice.error"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# A broken listener must not break the request that published
				logger.exception(f"Error delivering {event_name} to {cb}")


GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'NOTICE_SUCCESS', 'NOTICE_ERROR']
