import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from fridge.api.dependencies import get_event_recorder, refrigerator_session
from fridge.events.web_observers import EventRecorder
from fridge.utilities.constants import SHOPPING_MODE_DEFICIT, SHOPPING_MODE_LIFETIME
from fridge.utilities.validators import ExpirationCheckInput

router = APIRouter()
logger = logging.getLogger(__name__)


# -------------------- API: History --------------------
@router.get('/api/history')
def show_history(request: Request):
    with refrigerator_session(request) as fridge:
        actions = [a.to_dict() for a in fridge.show_history()]
    return {"empty": not actions, "count": len(actions), "actions": actions}


# -------------------- API: Expirations --------------------
@router.post('/api/expirations/check')
def check_expirations(payload: ExpirationCheckInput, request: Request):
    """Removes products expiring on or before reference_date. Destructive."""
    with refrigerator_session(request) as fridge:
        expired = fridge.check_expirations(payload.reference_date)
    if expired:
        logger.info("Expiration sweep %s removed %s", payload.reference_date, expired)
    return {"none_expired": not expired, "count": len(expired), "expired": expired}


# -------------------- API: Shopping List --------------------
@router.get('/api/shopping-list')
@router.get('/api/shopping-list/')
def shopping_list(request: Request,
                  mode: str = Query(default=SHOPPING_MODE_LIFETIME,
                                    pattern=f"^({SHOPPING_MODE_LIFETIME}|{SHOPPING_MODE_DEFICIT})$")):
    """
    Purchase suggestions derived from consumption history.

    mode=lifetime: total consumed per product over the whole history.
    mode=deficit: consumed minus what is currently held, only positive entries.
    """
    with refrigerator_session(request) as fridge:
        if mode == SHOPPING_MODE_DEFICIT:
            totals = fridge.generate_deficit_list()
        else:
            totals = fridge.generate_shopping_list()
    items = [{"name": name, "quantity": qty} for name, qty in sorted(totals.items())]
    return {"empty": not items, "count": len(items), "mode": mode, "items": items}


# -------------------- API: Events --------------------
@router.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
    recorder: EventRecorder = Depends(get_event_recorder)
):
    """
    Return recent refrigerator events (expired, depleted).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return recorder.get_events(since)
