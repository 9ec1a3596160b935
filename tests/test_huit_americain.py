import io
import random

import pytest

from cardtable.cards import Card, FrenchRank, FrenchSuit
from cardtable.errors import IllegalNumberOfPlayer
from cardtable.huit_americain import HuitAmericain
from cardtable.piles import DrawPile, Hand


def scripted(*answers):
    queue = list(answers)
    return lambda: queue.pop(0)


def make_game(n=2, answers=()):
    out = io.StringIO()
    game = HuitAmericain(n, True, input_fn=scripted(*answers), output=out, rng=random.Random(7))
    return game, out


def set_table(game, *cards, color=FrenchSuit.Heart):
    game.table.remove_all()
    for card in cards:
        game.table.add(card)
    game.color_of_pile = color


@pytest.mark.parametrize("n", [1, 6])
def test_number_of_players_is_checked(n):
    with pytest.raises(IllegalNumberOfPlayer, match="Nombre de joueur invalide"):
        make_game(n)


def test_opening_deal_and_messages():
    game, out = make_game(3)
    hands = [len(player.hand) for player in game.players]
    assert hands == [8, 8, 8]
    assert sum(hands) + len(game.table) + len(game.pioche) == 52
    assert game.color_of_pile == game.table.look().suit
    text = out.getvalue()
    assert text.index("Jouons aux 8 Americain") < text.index("Jeu 8 Americain initialise")


def test_same_rank_is_played():
    game, _ = make_game(2, ["0"])
    five_spade = Card(FrenchSuit.Spade, FrenchRank.Five)
    set_table(game, Card(FrenchSuit.Heart, FrenchRank.Five))
    game.players[0].hand = Hand([five_spade, Card(FrenchSuit.Club, FrenchRank.King)])
    game.play()
    assert game.table.look() is five_spade
    assert game.color_of_pile == FrenchSuit.Spade
    assert game.players.current_index == 1


def test_eight_changes_colour_and_keeps_turn():
    game, _ = make_game(2, ["0", "3"])
    eight = Card(FrenchSuit.Club, FrenchRank.Eight)
    set_table(game, Card(FrenchSuit.Heart, FrenchRank.Five))
    game.players[0].hand = Hand([eight, Card(FrenchSuit.Heart, FrenchRank.Deuce)])
    game.play()
    assert game.table.look() is eight
    assert game.color_of_pile == FrenchSuit.Spade
    assert game.players.current_index == 0


def test_ten_gives_another_turn():
    game, _ = make_game(2, ["0", "0"])
    ten = Card(FrenchSuit.Heart, FrenchRank.Ten)
    four = Card(FrenchSuit.Heart, FrenchRank.Four)
    set_table(game, Card(FrenchSuit.Heart, FrenchRank.Five))
    game.players[0].hand = Hand([ten, Card(FrenchSuit.Heart, FrenchRank.Six)])
    game.players[1].hand = Hand([four, Card(FrenchSuit.Club, FrenchRank.King)])
    game.play()
    assert game.table.look() is four
    assert len(game.table) == 3
    assert game.players.current_index == 0


def test_jack_reverses_direction():
    game, _ = make_game(3, ["0"])
    jack_spade = Card(FrenchSuit.Spade, FrenchRank.Jack)
    set_table(game, Card(FrenchSuit.Heart, FrenchRank.Jack))
    game.players[2].hand = Hand([jack_spade, Card(FrenchSuit.Club, FrenchRank.Four)])
    game.play()
    assert game.players.order == -1
    assert game.table.look() is jack_spade
    assert game.players.current_index == 1


def test_ace_on_top_makes_current_player_draw_two():
    game, out = make_game(2, ["0"])
    drawn = [Card(FrenchSuit.Club, rank) for rank in (FrenchRank.Three, FrenchRank.Four, FrenchRank.Nine)]
    game.pioche = DrawPile(drawn)
    set_table(game, Card(FrenchSuit.Heart, FrenchRank.Ace))
    game.players[0].hand = Hand([Card(FrenchSuit.Spade, FrenchRank.Four)])
    ace_spade = Card(FrenchSuit.Spade, FrenchRank.Ace)
    game.players[1].hand = Hand([ace_spade, Card(FrenchSuit.Club, FrenchRank.King)])
    game.play()
    assert len(game.players[0].hand) == 3
    assert len(game.pioche) == 1
    assert game.table.look() is ace_spade
    assert "Vous piochez 2 fois" in out.getvalue()


def test_winner_is_player_without_cards():
    game, out = make_game(2)
    assert not game.is_finished()
    game.players[1].hand = Hand()
    assert game.is_finished()
    assert game.the_winner_is() == 1
    assert "The winner is 1" in out.getvalue()