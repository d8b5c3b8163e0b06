"""Shopping list builder.

Derives purchase suggestions from the refrigerator's action history.
Provides build_shopping_list(history) and build_deficit_list(history, items).
"""
from collections import defaultdict
from typing import Dict, Iterable, Mapping
from fridge.domain.Action import Action, ActionKind
from fridge.domain.Product import Product


def _consumed_totals(history: Iterable[Action]) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for action in history:
        if action.kind is ActionKind.CONSUME:
            totals[action.item_name] += action.amount
    return dict(totals)


def build_shopping_list(history: Iterable[Action]) -> Dict[str, float]:
    """Sum consumed amounts per product over the whole history.

    Inserts never offset the total: this is a lifetime consumption counter,
    not the current shortfall.

    Returns:
        Dict of name -> cumulative consumed amount. Empty when nothing was consumed.
    """
    return _consumed_totals(history)


def build_deficit_list(history: Iterable[Action], items: Mapping[str, Product]) -> Dict[str, float]:
    """Shortfall variant: max(0, consumed - currently held), zero entries omitted."""
    deficit: Dict[str, float] = {}
    for name, consumed in _consumed_totals(history).items():
        product = items.get(name)
        have = product.quantity if product is not None else 0
        missing = consumed - have
        if missing > 0:
            deficit[name] = missing
    return deficit


__all__ = ['build_shopping_list', 'build_deficit_list']
