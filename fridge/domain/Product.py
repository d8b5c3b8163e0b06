"""Product domain entity: name, quantity and an opaque expiration date string."""
from typing import Union

Number = Union[int, float]


class Product:
    def __init__(self, name: str = "", quantity: Number = 0.0, expiration_date: str = ""):
        self.name = name
        self.quantity = quantity
        self.expiration_date = expiration_date

    def add_quantity(self, amount: Number):
        '''Increases the quantity. The refrigerator guarantees amount > 0.'''
        self.quantity += amount

    def consume_quantity(self, amount: Number):
        '''Decreases the quantity. The refrigerator guarantees 0 < amount <= quantity.'''
        self.quantity -= amount

    def __str__(self) -> str:
        return f"{self.name}: {self.quantity:g} (Expires: {self.expiration_date})"

    __repr__ = __str__

    def to_dict(self):
        '''Converts the Product to a plain dictionary for the JSON layer.'''
        return {
            "name": self.name,
            "quantity": self.quantity,
            "expiration_date": self.expiration_date,
        }
