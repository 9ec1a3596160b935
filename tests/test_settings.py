import pytest

from cardtable.cards import Card, ItalianRank, ItalianSuit
from cardtable.settings import (
    SameOrTrumpSettings,
    ScoreSettings,
    Settings,
    TrumpSettings,
)


def _card(suit, rank):
    return Card(suit, rank)


def test_settings_is_abstract():
    with pytest.raises(TypeError):
        Settings()


def test_value_of_uses_configured_value_or_rank():
    settings = TrumpSettings()
    settings.set_value(ItalianRank.Three, 9)
    assert settings.value_of(_card(ItalianSuit.Spade, ItalianRank.Three)) == 9
    assert settings.value_of(_card(ItalianSuit.Spade, ItalianRank.Six)) == int(ItalianRank.Six)


def test_trump_beats_plain_card():
    settings = TrumpSettings(ItalianSuit.Denari)
    trump = _card(ItalianSuit.Denari, ItalianRank.Deuce)
    plain = _card(ItalianSuit.Coppe, ItalianRank.Re)
    assert settings.compare(trump, plain) == 1
    assert settings.compare(plain, trump) == -1


def test_two_trumps_compare_by_value():
    settings = TrumpSettings()
    settings.set_trump(ItalianSuit.Bastoni)
    settings.set_value(ItalianRank.Ace, 11)
    ace = _card(ItalianSuit.Bastoni, ItalianRank.Ace)
    re = _card(ItalianSuit.Bastoni, ItalianRank.Re)
    assert settings.compare(ace, re) > 0
    assert settings.compare(re, ace) < 0
    assert settings.compare(ace, ace) == 0


def test_trump_settings_first_card_wins_across_plain_suits():
    settings = TrumpSettings(ItalianSuit.Denari)
    low = _card(ItalianSuit.Spade, ItalianRank.Deuce)
    high = _card(ItalianSuit.Coppe, ItalianRank.Re)
    assert settings.compare(low, high) == 1
    assert settings.compare(high, low) == 1


def test_trump_settings_same_plain_suit_by_value():
    settings = TrumpSettings(ItalianSuit.Denari)
    low = _card(ItalianSuit.Spade, ItalianRank.Deuce)
    high = _card(ItalianSuit.Spade, ItalianRank.Re)
    assert settings.compare(low, high) < 0
    assert settings.compare(high, low) > 0


def test_same_or_trump_compares_plain_suits_by_value():
    settings = SameOrTrumpSettings(ItalianSuit.Denari)
    low = _card(ItalianSuit.Spade, ItalianRank.Deuce)
    high = _card(ItalianSuit.Coppe, ItalianRank.Re)
    assert settings.compare(low, high) < 0
    assert settings.compare(high, low) > 0


def test_same_or_trump_still_honours_trump():
    settings = SameOrTrumpSettings(ItalianSuit.Denari)
    trump = _card(ItalianSuit.Denari, ItalianRank.Deuce)
    plain = _card(ItalianSuit.Coppe, ItalianRank.Re)
    assert settings.compare(trump, plain) == 1
    assert settings.compare(plain, trump) == -1


def test_score_settings_round_trip():
    scores = ScoreSettings()
    scores.set_score(ItalianRank.Three, 10)
    scores.set_score(ItalianRank.Ace, 11)
    assert scores.score_of(ItalianRank.Three) == 10
    assert scores.score_of(ItalianRank.Ace) == 11


def test_score_settings_overwrite():
    scores = ScoreSettings()
    scores.set_score(ItalianRank.Re, 4)
    scores.set_score(ItalianRank.Re, 10)
    assert scores.score_of(ItalianRank.Re) == 10


def test_score_settings_missing_rank_raises():
    with pytest.raises(KeyError):
        ScoreSettings().score_of(ItalianRank.Seven)