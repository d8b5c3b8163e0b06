import unittest
from fridge.domain.Action import Action, ActionKind
from fridge.domain.Product import Product
from fridge.logic.shopping.list_builder import build_deficit_list, build_shopping_list


class TestShoppingListBuilder(unittest.TestCase):

    def test_empty_history(self):
        self.assertEqual(build_shopping_list([]), {})

    def test_only_consume_records_count(self):
        history = [
            Action(ActionKind.INSERT, "milk", 4),
            Action(ActionKind.CONSUME, "milk", 1),
            Action(ActionKind.CONSUME, "bread of rye", 0.5),
            Action(ActionKind.INSERT, "milk", 6),
            Action(ActionKind.CONSUME, "milk", 2),
        ]
        self.assertEqual(build_shopping_list(history), {"milk": 3, "bread of rye": 0.5})

    def test_deficit_uses_current_stock(self):
        history = [Action(ActionKind.CONSUME, "milk", 3), Action(ActionKind.CONSUME, "egg", 1)]
        items = {"milk": Product("milk", 1, "2025-01-01"), "egg": Product("egg", 4, "2025-01-01")}
        self.assertEqual(build_deficit_list(history, items), {"milk": 2})
