import io
import random

import pytest

from cardtable.bataille import Bataille
from cardtable.cards import Card, FrenchRank, FrenchSuit
from cardtable.deck import create_cards
from cardtable.errors import IllegalNumberOfPlayer
from cardtable.piles import Hand


def _game(n=2):
    return Bataille(n, False, input_fn=lambda: "0", output=io.StringIO(), rng=random.Random(7))


def _hidden(rank, suit=FrenchSuit.Heart):
    return Card(suit, rank, hidden=True)


def test_one_player_is_not_enough():
    with pytest.raises(IllegalNumberOfPlayer) as info:
        _game(1)
    assert str(info.value) == "Nombre de joueur invalide: >2"


def test_whole_deck_dealt_face_down():
    game = _game()
    assert len(game.deck) == 0
    assert sum(len(p.hand) for p in game.players) == len(create_cards("Fr"))
    assert all(card.hidden for p in game.players for card in p.hand)
    assert len(game.discard_piles) == 2


def test_play_keeps_every_card():
    game = _game(3)
    total = sum(len(p.hand) for p in game.players)
    game.play()
    assert sum(len(p.hand) for p in game.players) == total
    assert all(pile.is_empty() for pile in game.discard_piles)
    assert all(card.hidden for p in game.players for card in p.hand)


def test_highest_card_takes_all():
    game = _game()
    game.players[0].hand = Hand([_hidden(FrenchRank.King)])
    game.players[1].hand = Hand([_hidden(FrenchRank.Deuce)])
    game.play()
    assert len(game.players[0].hand) == 2
    assert game.players[1].hand.is_empty()
    assert "Player 0 take all cards" in game.output.getvalue()


def test_tie_starts_a_bataille():
    game = _game()
    game.players[0].hand = Hand(
        [_hidden(FrenchRank.King), _hidden(FrenchRank.Three), _hidden(FrenchRank.Ace)]
    )
    game.players[1].hand = Hand(
        [_hidden(FrenchRank.King, FrenchSuit.Club), _hidden(FrenchRank.Four), _hidden(FrenchRank.Deuce)]
    )
    game.play()
    assert "---Bataille---" in game.output.getvalue()
    assert len(game.players[0].hand) == 6
    assert game.players[1].hand.is_empty()


def test_give_all_to_turns_cards_down():
    game = _game()
    played = [Card(FrenchSuit.Spade, FrenchRank.Ten), Card(FrenchSuit.Club, FrenchRank.Nine)]
    game.discard_piles[0].add(played[0])
    game.discard_piles[1].add(played[1])
    before = len(game.players[1].hand)
    game.give_all_to(1)
    assert len(game.players[1].hand) == before + 2
    assert all(card.hidden for card in played)
    assert all(pile.is_empty() for pile in game.discard_piles)


def test_finished_when_one_player_left():
    game = _game(3)
    assert not game.is_finished()
    game.players[1].hand = Hand()
    game.players[2].hand = Hand()
    assert game.is_finished()
    assert len(game.players) == 1


def test_winner_announced():
    game = _game()
    assert game.the_winner_is() == 0
    assert "The winner is : 0" in game.output.getvalue()