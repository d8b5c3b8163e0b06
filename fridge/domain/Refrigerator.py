"""Refrigerator aggregate: products keyed by name plus an append-only action log."""
import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Union

from fridge.domain.Action import Action, ActionKind
from fridge.domain.Product import Product
from fridge.events.Event_Bus import EventBus
from fridge.events.event_helpers import publish_product_depleted, publish_product_expired
from fridge.logic.shopping.list_builder import build_deficit_list, build_shopping_list

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _is_valid_quantity(quantity: Number) -> bool:
    return math.isfinite(quantity) and quantity > 0


class Outcome(str, Enum):
    OK = "ok"
    INVALID_QUANTITY = "invalid_quantity"
    NOT_FOUND = "not_found"
    INSUFFICIENT_QUANTITY = "insufficient_quantity"

    def __bool__(self) -> bool:
        return self is Outcome.OK


class Refrigerator:
    def __init__(self, event_bus: Optional[EventBus] = None):
        self.items: Dict[str, Product] = {}
        self.history: List[Action] = []
        self._event_bus = event_bus if event_bus is not None else EventBus()

    # --- Observer helpers -------------------------------------------------
    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def _log_action(self, kind: ActionKind, name: str, amount: Number):
        action = Action(kind, name, amount)
        self.history.append(action)
        logger.info("%s", action.describe())

    # --- Mutations --------------------------------------------------------
    def insert_product(self, name: str, quantity: Number, expiration_date: str) -> Outcome:
        '''
        Adds quantity to an existing product or stores a new one.
        A restock keeps the expiration date recorded by the first insert.
        '''
        if not _is_valid_quantity(quantity):
            logger.warning("Rejected insert of %r: quantity %s must be a finite number greater than zero", name, quantity)
            return Outcome.INVALID_QUANTITY

        product = self.items.get(name)
        if product is not None:
            product.add_quantity(quantity)
        else:
            self.items[name] = Product(name, quantity, expiration_date)

        self._log_action(ActionKind.INSERT, name, quantity)
        return Outcome.OK

    def consume_product(self, name: str, quantity: Number) -> Outcome:
        '''
        Takes quantity out of a stored product. A product left with exactly
        zero is removed. Rejected requests change nothing.
        '''
        if not _is_valid_quantity(quantity):
            logger.warning("Rejected consume of %r: quantity %s must be a finite number greater than zero", name, quantity)
            return Outcome.INVALID_QUANTITY

        product = self.items.get(name)
        if product is None:
            logger.warning("Rejected consume of %r: product not found", name)
            return Outcome.NOT_FOUND

        if product.quantity < quantity:
            logger.warning("Rejected consume of %r: requested %s, only %s held", name, quantity, product.quantity)
            return Outcome.INSUFFICIENT_QUANTITY

        product.consume_quantity(quantity)
        self._log_action(ActionKind.CONSUME, name, quantity)

        if product.quantity == 0:
            del self.items[name]
            publish_product_depleted(product, bus=self._event_bus)
        return Outcome.OK

    # --- Queries ----------------------------------------------------------
    def get_product(self, name: str) -> Optional[Product]:
        return self.items.get(name)

    def show_status(self) -> List[Product]:
        '''
        Returns the current products. An empty list means the refrigerator is empty.
        Order is unspecified.
        '''
        return list(self.items.values())

    def show_history(self) -> List[Action]:
        '''
        Returns every logged action in the order it happened.
        '''
        return list(self.history)

    def check_expirations(self, reference_date: str) -> List[str]:
        '''
        Removes every product whose expiration date is on or before reference_date
        and returns their names. Dates are compared as plain strings.
        '''
        expired = [p for p in self.items.values() if reference_date >= p.expiration_date]
        for product in expired:
            del self.items[product.name]
            logger.info("Product %s has expired (reference date %s)", product.name, reference_date)
            publish_product_expired(product, reference_date, bus=self._event_bus)
        if not expired:
            logger.debug("No expired products as of %s", reference_date)
        return [p.name for p in expired]

    def generate_shopping_list(self) -> Dict[str, float]:
        '''Lifetime consumption per product name, derived from the history.'''
        return build_shopping_list(self.history)

    def generate_deficit_list(self) -> Dict[str, float]:
        '''Consumption not covered by current stock, per product name.'''
        return build_deficit_list(self.history, self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return name in self.items

    def __str__(self) -> str:
        if not self.items:
            return "The refrigerator is empty."
        items_str = ",\n\t".join(str(item) for item in self.items.values())
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
