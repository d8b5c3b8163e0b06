"""Web-facing observers for refrigerator events.

An EventRecorder subscribes to one refrigerator's EventBus for:
  - fridge.product_expired
  - fridge.product_depleted

and keeps an in-memory ring buffer of recent events that the API exposes at
/api/events. Each event gets an auto-increment id so clients can poll with
since=<last_id_seen>. A Lock guards the buffer since FastAPI runs sync
endpoints on a threadpool. max_events caps memory use.

Every application gets its own recorder, so separate apps never share a stream.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone
import logging

from fridge.utilities.config import MAX_EVENTS
from .Event_Bus import EventBus, PRODUCT_EXPIRED, PRODUCT_DEPLETED

logger = logging.getLogger(__name__)


class EventRecorder:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1

    def attach(self, bus: EventBus):
        """Subscribe to a bus; subscribing twice is a no-op."""
        bus.subscribe(PRODUCT_EXPIRED, self.record)
        bus.subscribe(PRODUCT_DEPLETED, self.record)
        logger.debug("Event recorder attached to %r", bus)
        return self

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat()
            }
            if isinstance(payload, dict):
                product = payload.get('product')
                if product is not None and hasattr(product, 'name'):
                    evt['name'] = product.name
                    evt['expiration_date'] = getattr(product, 'expiration_date', '')
                if 'reference_date' in payload:
                    evt['reference_date'] = payload['reference_date']
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns the whole buffer. next_cursor is the largest id,
        so the client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventRecorder']
