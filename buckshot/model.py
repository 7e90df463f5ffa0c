"""Core game types: actions, items, shells, players and the gun's visible state."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum

N_ROUNDS = 3
N_GUN_LOADS = 3
MAX_HEALTH = 3

MIN_BULLETS = 3
MAX_BULLETS = 7
BULLET_SPREAD = MAX_BULLETS - MIN_BULLETS + 1

ITEM_COUNT = 5


class TurnAction(Enum):
    """Who the current player fires at."""

    SHOOT_SELF = 0
    SHOOT_OTHER = 1


class ItemAction(Enum):
    """Which item slot, if any, the current player uses."""

    NO_ITEM = 0
    ITEM1 = 1
    ITEM2 = 2


_ITEM_DESCRIPTIONS = {
    0: "None",
    1: "Peek at current shell",
    2: "Eject current shell",
    3: "Skip next opponent turn",
    4: "Gain one health",
    5: "Empty and reload the gun",
}


class Item(IntEnum):
    """An item a player may hold in one of two slots."""

    EMPTY = 0
    PEEK_CURRENT = 1
    EJECT_CURRENT = 2
    SKIP_ENEMY = 3
    HEALTH_KIT = 4
    RESET_GUN = 5

    def describe(self) -> str:
        """Return a human-readable description of the item."""
        return _ITEM_DESCRIPTIONS[self.value]


class Bullet(IntEnum):
    """A shell in the gun, or UNKNOWN when it has not been peeked at."""

    BLANK = 0
    LIVE = 1
    UNKNOWN = 2


def random_item(rng: random.Random) -> Item:
    """Draw a non-empty item uniformly at random."""
    return Item(rng.randrange(ITEM_COUNT) + 1)


@dataclass
class Player:
    """A player's round wins, remaining lives and two item slots."""

    rounds: int = 0
    lives: int = 0
    item1: Item = Item.EMPTY
    item2: Item = Item.EMPTY

    def take_item(self, action: ItemAction) -> Item:
        """Remove and return the item in the slot chosen by ``action``."""
        if action is ItemAction.ITEM1:
            item, self.item1 = self.item1, Item.EMPTY
            return item
        if action is ItemAction.ITEM2:
            item, self.item2 = self.item2, Item.EMPTY
            return item
        return Item.EMPTY

    def add_item(self, rng: random.Random) -> None:
        """Fill the first empty slot with a random item; do nothing if both are full."""
        if self.item1 is Item.EMPTY:
            self.item1 = random_item(rng)
        elif self.item2 is Item.EMPTY:
            self.item2 = random_item(rng)


@dataclass
class GunState:
    """What the players can see of the gun: shells left and live shells left."""

    current_bullets: int
    current_live_bullets: int