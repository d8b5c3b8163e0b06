"""Event helper utilities.

Typed publishers for refrigerator events, so callers never build payload
dicts by hand.

Quick import:
    from fridge.events.event_helpers import (
        publish_product_expired, publish_product_depleted,
        PRODUCT_EXPIRED, PRODUCT_DEPLETED
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import EventBus, PRODUCT_EXPIRED, PRODUCT_DEPLETED

__all__ = [
    'publish_product_expired', 'publish_product_depleted',
    'PRODUCT_EXPIRED', 'PRODUCT_DEPLETED'
]


def publish_product_expired(product: Any, reference_date: str, bus: EventBus):
    """Publish a fridge.product_expired event."""
    bus.publish(PRODUCT_EXPIRED, {
        'product': product,
        'reference_date': reference_date
    })


def publish_product_depleted(product: Any, bus: EventBus):
    """Publish a fridge.product_depleted event."""
    bus.publish(PRODUCT_DEPLETED, {
        'product': product
    })
