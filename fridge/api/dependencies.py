"""FastAPI helpers for reaching the application's refrigerator."""
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request

from fridge.domain.Refrigerator import Outcome, Refrigerator
from fridge.events.web_observers import EventRecorder

# Outcome -> HTTP status for rejected requests
OUTCOME_STATUS = {
    Outcome.INVALID_QUANTITY: 400,
    Outcome.NOT_FOUND: 404,
    Outcome.INSUFFICIENT_QUANTITY: 409,
}


def install_refrigerator(app: FastAPI, fridge: Refrigerator | None = None) -> Refrigerator:
    """Attach a fresh (or given) refrigerator, its lock and its event recorder to the app state."""
    app.state.fridge = fridge if fridge is not None else Refrigerator()
    app.state.fridge_lock = Lock()
    app.state.event_recorder = EventRecorder().attach(app.state.fridge.event_bus)
    return app.state.fridge


@contextmanager
def refrigerator_session(request: Request) -> Iterator[Refrigerator]:
    """Hold the app-wide lock for the duration of one refrigerator call."""
    with request.app.state.fridge_lock:
        yield request.app.state.fridge


def get_event_recorder(request: Request) -> EventRecorder:
    return request.app.state.event_recorder


def raise_for_outcome(outcome: Outcome):
    if outcome is not Outcome.OK:
        raise HTTPException(status_code=OUTCOME_STATUS[outcome], detail=outcome.value)
