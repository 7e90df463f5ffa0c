"""The match loop: rounds, turns, items, reloads and the final result."""

from __future__ import annotations

import random
import sys
from copy import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TextIO

from .bots import HumanPlayer, Strategy
from .model import (
    BULLET_SPREAD,
    MAX_HEALTH,
    MIN_BULLETS,
    N_GUN_LOADS,
    N_ROUNDS,
    Bullet,
    GunState,
    Item,
    ItemAction,
    Player,
    TurnAction,
    random_item,
)

_RULE = "------------------------------------------"
_ROUNDS_TO_WIN = 2
_ABSTAIN_DRAWS_TO_END = 2


class Outcome(Enum):
    """How a match ended; the value is the message announced at the end."""

    PLAYER1_WINS = "Player 1 wins"
    PLAYER2_WINS = "Player 2 wins"
    DRAW_BY_ABSTENTION = "Draw by abstention"
    LOSS = "Loss"


def load_shells(rng: random.Random) -> tuple[GunState, list[Bullet]]:
    """Load a fresh set of shells, returning the visible gun state and the shell order."""
    count = rng.randrange(BULLET_SPREAD) + MIN_BULLETS
    upper = int(count / 2 + 1) + 1
    lower = int(count / 2 - 0.5)
    live = rng.randrange(upper - lower) + lower

    shells: list[Bullet] = []
    remaining, live_left = count, live
    for _ in range(count):
        chance = rng.randrange(101) / 100
        if chance > live_left / remaining:
            shells.append(Bullet.BLANK)
        else:
            shells.append(Bullet.LIVE)
            live_left -= 1
        remaining -= 1
    return GunState(count, live), shells


@dataclass
class _Round:
    gun: GunState
    shells: list[Bullet]
    index: int = 0
    reloads_left: int = N_GUN_LOADS - 1
    reload_starter: int = 0
    pending_abstain: bool = False
    may_abstain: list[bool] = field(default_factory=lambda: [True, True])
    skip_opponent: bool = False


class Game:
    """A best-of-three match between two strategies."""

    def __init__(
        self,
        player1: Strategy,
        player2: Strategy,
        rng: random.Random | None = None,
        output: TextIO | None = None,
        debug: bool = False,
        pause: Callable[[], object] | None = None,
    ) -> None:
        self._strategies = (player1, player2)
        self._rng = rng if rng is not None else random.Random()
        self._output = output if output is not None else sys.stdout
        self._debug = debug
        self._pause = pause
        self.players = (Player(), Player())
        self.abstain_draws = 0

    def play(self) -> Outcome:
        """Play the whole match, announcing every event, and return how it ended."""
        self.players = (Player(), Player())
        self.abstain_draws = 0
        starting = self._rng.randrange(2)

        for number in range(1, N_ROUNDS + 1):
            for player in self.players:
                player.lives = MAX_HEALTH
                player.item1 = random_item(self._rng)
                player.item2 = random_item(self._rng)
            gun, shells = self._load_gun()
            starting = 1 - starting
            state = _Round(gun, shells, reload_starter=starting)

            if self.abstain_draws == _ABSTAIN_DRAWS_TO_END:
                break

            self._write(f"--------------- Round {number} ---------------\n")
            self._write(f"Player {starting + 1} will start:\n\n")
            self._play_round(state, starting)

            if any(player.rounds == _ROUNDS_TO_WIN for player in self.players):
                break

        outcome = self._outcome()
        self._write(f"{_RULE}\n    Game Over - {outcome.value}\n{_RULE}\n")
        return outcome

    def _outcome(self) -> Outcome:
        first, second = self.players
        if first.rounds == _ROUNDS_TO_WIN:
            return Outcome.PLAYER1_WINS
        if second.rounds == _ROUNDS_TO_WIN:
            return Outcome.PLAYER2_WINS
        if self.abstain_draws == _ABSTAIN_DRAWS_TO_END:
            return Outcome.DRAW_BY_ABSTENTION
        return Outcome.LOSS

    def _write(self, text: str) -> None:
        self._output.write(text)

    def _round_over(self, message: str) -> None:
        self._write(f"\n--------------- Round Over ---------------\n    {message}\n{_RULE}\n\n")

    def _load_gun(self) -> tuple[GunState, list[Bullet]]:
        gun, shells = load_shells(self._rng)
        if self._debug:
            self._write(f"Total: {gun.current_bullets} Live: {gun.current_live_bullets}\n")
            self._write("".join(f"{int(shell)} " for shell in shells) + "\n")
        return gun, shells

    def _play_round(self, state: _Round, player: int) -> None:
        while True:
            self._write(f"Player {player + 1}:\n")
            if self._debug:
                remaining = state.shells[state.index : state.index + state.gun.current_bullets]
                self._write("Current bullets: [" + "".join(f"{int(s)} " for s in remaining) + "]\n")

            me, other = self.players[player], self.players[1 - player]
            strategy = self._strategies[player]

            if state.may_abstain[player] or (
                player == state.reload_starter and state.pending_abstain
            ):
                wants = bool(
                    strategy.abstain(copy(me), copy(other), copy(state.gun), state.pending_abstain)
                )
                state.may_abstain[player] = False
                if state.pending_abstain and wants:
                    self._round_over("Both players have abstained - Draw")
                    self.abstain_draws += 1
                    return
                state.pending_abstain = wants
                if wants:
                    player = 1 - player
                    continue

            next_bullet = Bullet.UNKNOWN
            choice = strategy.choose_item(copy(me), copy(other), copy(state.gun))
            if choice is not ItemAction.NO_ITEM:
                item = me.take_item(choice)
                if item is Item.PEEK_CURRENT:
                    next_bullet = state.shells[state.index]
                    if isinstance(strategy, HumanPlayer):
                        seen = "live" if next_bullet is Bullet.LIVE else "blank"
                        self._write(f"\tPeeking current bullet - {seen}\n")
                elif item is Item.EJECT_CURRENT:
                    if not self._eject(state, player):
                        return
                elif item is Item.SKIP_ENEMY:
                    state.skip_opponent = True
                elif item is Item.HEALTH_KIT:
                    me.lives += 1
                elif item is Item.RESET_GUN:
                    self._write("Reloading the gun\n\n")
                    state.gun, state.shells = self._load_gun()
                    state.index = 0

            action = strategy.choose_action(copy(me), copy(other), copy(state.gun), next_bullet)
            player = self._fire(state, player, action)

            if self.players[0].lives == 0:
                self._round_over("Player 1 is dead")
                self.players[1].rounds += 1
                return
            if self.players[1].lives == 0:
                self._round_over("Player 2 is dead")
                self.players[0].rounds += 1
                return

            if not self._spend_shell(state, player):
                return

            if self._pause is not None:
                self._write("\nPress ENTER to continue:")
                self._output.flush()
                self._pause()

    def _fire(self, state: _Round, player: int, action: TurnAction) -> int:
        shell = state.shells[state.index]
        at_self = action is TurnAction.SHOOT_SELF
        who = "self" if at_self else "other"
        if shell is Bullet.LIVE:
            target = player if at_self else 1 - player
            self.players[target].lives -= 1
            state.gun.current_live_bullets -= 1
            player = self._pass_turn(state, player)
            self._write(f"\tShot {who} - live round\n")
        elif at_self:
            self._write("\tShot self - empty round\n")
        else:
            player = self._pass_turn(state, player)
            self._write("\tShot other - empty round\n")
        return player

    @staticmethod
    def _pass_turn(state: _Round, player: int) -> int:
        following = player if state.skip_opponent else 1 - player
        state.skip_opponent = False
        return following

    def _eject(self, state: _Round, player: int) -> bool:
        shell = state.shells[state.index]
        state.index += 1
        if shell is Bullet.LIVE:
            state.gun.current_live_bullets -= 1
        return self._after_shell_gone(state, player)

    def _spend_shell(self, state: _Round, player: int) -> bool:
        state.index += 1
        return self._after_shell_gone(state, player)

    def _after_shell_gone(self, state: _Round, player: int) -> bool:
        state.gun.current_bullets -= 1
        if state.gun.current_bullets != 0:
            return True
        if state.reloads_left == 0:
            self._round_over("No more reloads - Draw")
            return False
        state.reloads_left -= 1
        self._write(f"\n{_RULE}\n    No more bullets - Reloading the gun\n{_RULE}\n\n")
        state.gun, state.shells = self._load_gun()
        state.index = 0
        state.pending_abstain = False
        state.may_abstain = [True, True]
        state.reload_starter = player
        for each in self.players:
            each.add_item(self._rng)
        return True