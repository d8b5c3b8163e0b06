"""Action records: one structured fact per successful insert or consume."""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ActionKind(str, Enum):
    INSERT = "insert"
    CONSUME = "consume"


_VERBS = {ActionKind.INSERT: "Inserted", ActionKind.CONSUME: "Consumed"}


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    item_name: str
    amount: Union[int, float]

    def describe(self) -> str:
        '''Human readable line, e.g. "Consumed 2 of milk". Display only.'''
        return f"{_VERBS[self.kind]} {self.amount:g} of {self.item_name}"

    def __str__(self) -> str:
        return self.describe()

    def to_dict(self):
        return {
            "kind": self.kind.value,
            "item_name": self.item_name,
            "amount": self.amount,
            "description": self.describe(),
        }
