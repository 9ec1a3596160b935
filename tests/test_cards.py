from cardtable.cards import (
    Card,
    FrenchRank,
    FrenchSuit,
    ItalianRank,
    ItalianSuit,
    UnoRank,
    UnoSuit,
)


class _FixedSettings:
    def __init__(self):
        self.calls = []

    def compare(self, a, b):
        self.calls.append((a, b))
        return -7


def test_rank_values_fixed_by_enumeration():
    assert FrenchRank(2) is FrenchRank.Deuce
    assert FrenchRank(14) is FrenchRank.Ace
    assert ItalianRank(1) is ItalianRank.Ace
    assert ItalianRank(10) is ItalianRank.Re
    assert UnoSuit(4) is UnoSuit.NoColor
    assert UnoRank(14) is UnoRank.SuperJoker
    assert Card(FrenchSuit.Heart, FrenchRank(2)) < Card(FrenchSuit.Heart, FrenchRank(14))


def test_labels():
    assert FrenchRank.Queen.label == "Q"
    assert FrenchSuit.Spade.label == "\u2660"
    assert str(ItalianSuit.Coppe) == "Co"
    assert ItalianRank.Cavallo.label == "C"
    assert UnoRank.Reverse.label == "\u21ba"
    assert UnoRank.PlusTwo.label == "+2"
    assert UnoSuit.NoColor.label == "~"
    assert str(Card(FrenchSuit.Spade, FrenchRank.Queen)) == "Q\u2660"
    assert str(Card(ItalianSuit.Coppe, ItalianRank.Cavallo)) == "CCo"
    assert str(Card(UnoSuit.NoColor, UnoRank.Reverse)) == "\u21ba~"
    assert str(Card(UnoSuit.Red, UnoRank.PlusTwo)) == "+2R"


def test_visible_card_prints_rank_then_suit():
    card = Card(FrenchSuit.Heart, FrenchRank.Ace)
    assert str(card) == FrenchRank.Ace.label + FrenchSuit.Heart.label


def test_hidden_card_prints_placeholder():
    card = Card(ItalianSuit.Denari, ItalianRank.Re, hidden=True)
    assert str(card) == "[]"
    assert not card.visible


def test_flip_toggles_and_returns():
    card = Card(UnoSuit.Blue, UnoRank.Five)
    card.flip()
    assert card.hidden
    card.flip()
    assert not card.hidden
    assert str(card) == "5B"


def test_ordering_by_rank_only():
    low = Card(FrenchSuit.Spade, FrenchRank.Deuce)
    high = Card(FrenchSuit.Heart, FrenchRank.King)
    assert low < high
    assert high > low
    assert low <= Card(FrenchSuit.Club, FrenchRank.Deuce)
    assert high >= Card(FrenchSuit.Club, FrenchRank.King)
    assert max([low, high]) is high


def test_same_rank_and_suit():
    a = Card(FrenchSuit.Heart, FrenchRank.Seven)
    b = Card(FrenchSuit.Club, FrenchRank.Seven)
    c = Card(FrenchSuit.Heart, FrenchRank.Nine)
    assert a.same_rank(b)
    assert not a.same_rank(c)
    assert a.same_suit(c)
    assert not a.same_suit(b)


def test_equality_is_identity():
    a = Card(FrenchSuit.Heart, FrenchRank.Seven)
    b = Card(FrenchSuit.Heart, FrenchRank.Seven)
    assert a == a
    assert not (a == b)


def test_clone_is_independent_copy():
    card = Card(ItalianSuit.Spade, ItalianRank.Fante)
    copy = card.clone()
    assert copy is not card
    assert (copy.suit, copy.rank, copy.hidden) == (card.suit, card.rank, card.hidden)
    copy.flip()
    assert not card.hidden


def test_compare_delegates_to_settings():
    settings = _FixedSettings()
    a = Card(FrenchSuit.Heart, FrenchRank.Ten)
    b = Card(FrenchSuit.Club, FrenchRank.Jack)
    assert a.compare(b, settings) == -7
    assert settings.calls == [(a, b)]