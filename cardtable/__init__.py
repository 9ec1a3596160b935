"""Terminal card games and the cards, piles and rules they are built from."""

__version__ = "0.1.0"
__all__ = [
    "actions",
    "bataille",
    "briscola",
    "cards",
    "cli",
    "deck",
    "errors",
    "game",
    "huit_americain",
    "movement",
    "piles",
    "players",
    "scopa",
    "settings",
    "uno",
]