import io

import pytest

from buckshot.bots import AbstainingBot, HumanPlayer, ShootOtherBot, format_game_state
from buckshot.model import Bullet, GunState, Item, ItemAction, Player, TurnAction


@pytest.fixture
def me():
    return Player(rounds=0, lives=3, item1=Item.HEALTH_KIT, item2=Item.EMPTY)


@pytest.fixture
def other():
    return Player(rounds=1, lives=2, item1=Item.PEEK_CURRENT, item2=Item.RESET_GUN)


@pytest.fixture
def gun():
    return GunState(current_bullets=5, current_live_bullets=2)


def _human(answers):
    out = io.StringIO()
    return HumanPlayer(input_func=iter(answers).__next__, output=out), out


def test_abstaining_bot(me, other, gun):
    bot = AbstainingBot()
    assert bot.abstain(me, other, gun, False) is True
    assert bot.abstain(me, other, gun, True) is True
    assert bot.choose_item(me, other, gun) is ItemAction.NO_ITEM
    assert bot.choose_action(me, other, gun, Bullet.UNKNOWN) is TurnAction.SHOOT_SELF


def test_shoot_other_bot(me, other, gun):
    bot = ShootOtherBot()
    assert bot.abstain(me, other, gun, True) is False
    assert bot.choose_item(me, other, gun) is ItemAction.NO_ITEM
    assert bot.choose_action(me, other, gun, Bullet.LIVE) is TurnAction.SHOOT_OTHER


def test_format_game_state_without_items(me, other, gun):
    text = format_game_state(me, other, gun, False)
    assert text == (
        "\tCurrent game state:\n"
        "\t  Health | Self: 3   | Opponent: 2\n"
        "\t  Gun:   | Total: 5  | Live: 2\n\n"
    )


def test_format_game_state_with_items(me, other, gun):
    text = format_game_state(me, other, gun, True)
    assert "\t  Available items: [Gain one health, None]\n" in text
    assert "\t  Opponents items: [Peek at current shell, Empty and reload the gun]\n\n" in text
    assert text.startswith(format_game_state(me, other, gun, False))


def test_human_abstain_yes(me, other, gun):
    human, out = _human(["1"])
    assert human.abstain(me, other, gun, False) is True
    assert "Would you like to request an abstain" in out.getvalue()


def test_human_abstain_accept_prompt(me, other, gun):
    human, out = _human(["0"])
    assert human.abstain(me, other, gun, True) is False
    assert "Your opponent has requested an abstain" in out.getvalue()


def test_human_reprompts_on_bad_input(me, other, gun):
    human, out = _human(["x", "", "9", "1"])
    assert human.abstain(me, other, gun, False) is True
    assert out.getvalue().count("Would you like to request an abstain") == 4


def test_human_only_first_character_counts(me, other, gun):
    human, _ = _human(["2abc"])
    assert human.choose_item(me, other, gun) is ItemAction.ITEM2


@pytest.mark.parametrize(
    "answer, expected",
    [("0", ItemAction.NO_ITEM), ("1", ItemAction.ITEM1), ("2", ItemAction.ITEM2)],
)
def test_human_choose_item(me, other, gun, answer, expected):
    human, out = _human([answer])
    assert human.choose_item(me, other, gun) is expected
    assert "Available items" in out.getvalue()


@pytest.mark.parametrize(
    "answer, expected",
    [("0", TurnAction.SHOOT_SELF), ("1", TurnAction.SHOOT_OTHER)],
)
def test_human_choose_action(me, other, gun, answer, expected):
    human, out = _human([answer])
    assert human.choose_action(me, other, gun, Bullet.UNKNOWN) is expected
    assert "Enter who you want to fire at" in out.getvalue()
    assert "Available items" not in out.getvalue()


def test_human_action_rejects_item_two(me, other, gun):
    human, out = _human(["2", "0"])
    assert human.choose_action(me, other, gun, Bullet.UNKNOWN) is TurnAction.SHOOT_SELF
    assert out.getvalue().count("Enter who you want to fire at") == 2


def test_human_end_of_input_raises(me, other, gun):
    def closed():
        raise EOFError

    human = HumanPlayer(input_func=closed, output=io.StringIO())
    with pytest.raises(EOFError):
        human.choose_item(me, other, gun)