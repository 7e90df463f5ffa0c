"""Player strategies: the two built-in bots and an interactive human player."""

from __future__ import annotations

import sys
from typing import Callable, Protocol, TextIO

from .model import Bullet, GunState, ItemAction, Player, TurnAction


class Strategy(Protocol):
    """The decisions a player makes during a turn."""

    def abstain(self, me: Player, other: Player, gun: GunState, opponent_request: bool) -> bool:
        """Request an abstain, or accept one when ``opponent_request`` is true."""
        ...

    def choose_item(self, me: Player, other: Player, gun: GunState) -> ItemAction:
        """Pick which item slot to use, if any."""
        ...

    def choose_action(
        self, me: Player, other: Player, gun: GunState, next_bullet: Bullet
    ) -> TurnAction:
        """Pick who to shoot; ``next_bullet`` is known only after a peek."""
        ...


class AbstainingBot:
    """Always asks to abstain, never uses items and shoots itself."""

    def abstain(self, me: Player, other: Player, gun: GunState, opponent_request: bool) -> bool:
        return True

    def choose_item(self, me: Player, other: Player, gun: GunState) -> ItemAction:
        return ItemAction.NO_ITEM

    def choose_action(
        self, me: Player, other: Player, gun: GunState, next_bullet: Bullet
    ) -> TurnAction:
        return TurnAction.SHOOT_SELF


class ShootOtherBot:
    """Never abstains, never uses items and always shoots the opponent."""

    def abstain(self, me: Player, other: Player, gun: GunState, opponent_request: bool) -> bool:
        return False

    def choose_item(self, me: Player, other: Player, gun: GunState) -> ItemAction:
        return ItemAction.NO_ITEM

    def choose_action(
        self, me: Player, other: Player, gun: GunState, next_bullet: Bullet
    ) -> TurnAction:
        return TurnAction.SHOOT_OTHER


def format_game_state(me: Player, other: Player, gun: GunState, show_items: bool) -> str:
    """Render the state shown to a human player before each decision."""
    text = (
        "\tCurrent game state:\n"
        f"\t  Health | Self: {me.lives}   | Opponent: {other.lives}\n"
        f"\t  Gun:   | Total: {gun.current_bullets}  | Live: {gun.current_live_bullets}\n\n"
    )
    if show_items:
        text += (
            f"\t  Available items: [{me.item1.describe()}, {me.item2.describe()}]\n"
            f"\t  Opponents items: [{other.item1.describe()}, {other.item2.describe()}]\n\n"
        )
    return text


class HumanPlayer:
    """A player whose decisions are typed in at a prompt."""

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._output = output if output is not None else sys.stdout

    def _ask(self, prompt: str, choices: dict[str, object]) -> object:
        while True:
            self._output.write(prompt)
            self._output.flush()
            answer = self._input()
            if answer and answer[0] in choices:
                return choices[answer[0]]

    def abstain(self, me: Player, other: Player, gun: GunState, opponent_request: bool) -> bool:
        self._output.write(format_game_state(me, other, gun, True))
        if opponent_request:
            prompt = "\tYour opponent has requested an abstain; do you accept - [0:no, 1:yes]: "
        else:
            prompt = "\tWould you like to request an abstain - [0:no, 1:yes]: "
        return bool(self._ask(prompt, {"0": False, "1": True}))

    def choose_item(self, me: Player, other: Player, gun: GunState) -> ItemAction:
        self._output.write(format_game_state(me, other, gun, True))
        choice = self._ask(
            "\tEnter the item you want to use - [0:none, 1:item 1, 2:item 2]: ",
            {"0": ItemAction.NO_ITEM, "1": ItemAction.ITEM1, "2": ItemAction.ITEM2},
        )
        assert isinstance(choice, ItemAction)
        return choice

    def choose_action(
        self, me: Player, other: Player, gun: GunState, next_bullet: Bullet
    ) -> TurnAction:
        self._output.write(format_game_state(me, other, gun, False))
        choice = self._ask(
            "\tEnter who you want to fire at - [0:self, 1:opponent]: ",
            {"0": TurnAction.SHOOT_SELF, "1": TurnAction.SHOOT_OTHER},
        )
        assert isinstance(choice, TurnAction)
        return choice