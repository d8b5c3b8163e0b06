"""Simple Event Bus / Observer implementation for refrigerator events.

Event names used so far:
  fridge.product_expired -> payload {"product": Product, "reference_date": str}
  fridge.product_depleted -> payload {"product": Product}

Subscribers are callables taking (event_name, payload). Each refrigerator
owns its bus, so separate stores never see each other's events.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

from fridge.utilities.constants import PRODUCT_EXPIRED, PRODUCT_DEPLETED

logger = logging.getLogger(__name__)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)

__all__ = ["EventBus", "PRODUCT_EXPIRED", "PRODUCT_DEPLETED"]
