# buckshot

A small turn-based duel for two players, usually two bots. A shotgun is
loaded with a random mix of live and blank shells. The players take turns
choosing to fire at themselves or at their opponent. Items can give them an
edge along the way.

## Rules

- A game has up to 3 rounds. The first player to win 2 rounds wins the game.
- Each player starts a round with 3 health and two random items.
- The gun holds between 3 and 7 shells. Roughly half of them are live. You
  always know how many shells are left and how many of those are live, but
  not what order they are in.
- Shooting yourself with a blank lets you take another turn. Any other shot
  passes the turn to your opponent, unless you used the skip item that turn.
- When the gun is empty it is reloaded. Each player then gets a new item if
  they have a free slot. After the third load runs out, the round is a draw.
- At the start of a round, and after each reload, each player may ask to
  abstain on their first turn. A request passes the turn to the opponent,
  who is asked whether to accept. If both agree, the round is a draw. Two
  such draws end the game.
- If nobody has won 2 rounds when the game ends, the result is a loss for
  both.

Items (`buckshot.model.Item`):

| Item | Effect |
| --- | --- |
| `PEEK_CURRENT` | Peek at current shell |
| `EJECT_CURRENT` | Eject current shell |
| `SKIP_ENEMY` | Skip next opponent turn |
| `HEALTH_KIT` | Gain one health |
| `RESET_GUN` | Empty and reload the gun |

## Running

```
buckshot
```

By default the built-in `AbstainingBot` (player 1) plays `ShootOtherBot`
(player 2), and the game is printed to the terminal. Options:

- `--human`: play as player 2 at the keyboard.
- `--no-pause`: with `--human`, do not wait for ENTER between turns.
- `--debug`: show the shells in the gun.
- `--seed N`: seed the random generator to make a game repeatable.

## Writing a bot

A bot is any object with the three methods of the `Strategy` protocol in
`buckshot.bots`. Each is given a copy of your own `Player`, a copy of your
opponent's `Player`, and a copy of the current `GunState`:

```python
from buckshot.bots import ShootOtherBot
from buckshot.game import Game
from buckshot.model import Bullet, ItemAction, TurnAction


class Cautious:
    def abstain(self, me, other, gun, opponent_request):
        return False

    def choose_item(self, me, other, gun):
        return ItemAction.NO_ITEM

    def choose_action(self, me, other, gun, next_bullet):
        if next_bullet is Bullet.LIVE:
            return TurnAction.SHOOT_OTHER
        if next_bullet is Bullet.BLANK:
            return TurnAction.SHOOT_SELF
        if gun.current_live_bullets * 2 > gun.current_bullets:
            return TurnAction.SHOOT_OTHER
        return TurnAction.SHOOT_SELF


outcome = Game(Cautious(), ShootOtherBot()).play()
print(outcome)
```

`next_bullet` is `Bullet.UNKNOWN` unless you used the peek item this turn.
`Game.play()` returns an `Outcome` (`PLAYER1_WINS`, `PLAYER2_WINS`,
`DRAW_BY_ABSTENTION` or `LOSS`). You can pass a seeded `random.Random` as
`rng` to make a game repeatable, and any writable text stream as `output`
to capture the log of the game. `load_shells(rng)` in `buckshot.game` loads
a gun on its own and returns its `GunState` and the order of its shells.

The included players are `AbstainingBot`, `ShootOtherBot` and
`HumanPlayer`. `HumanPlayer` asks for each decision at a prompt; its input
function and output stream can be replaced.

## What it does not do

Matches are played between two players in one process only: there is no
network play, no saved games and no graphical display.