# cardtable

Card games played in the terminal, by several people sharing the keyboard
or by one person against simple computer players.

Games on the menu:

1. Bataille
2. Uno
3. Scopa
4. Briscola
5. 8 Americain

## Installing

```
pip install .
```

## Playing

Start the menu with:

```
cardtable
```

You are asked for the number of a game, the number of players, and whether
to play with the computer (`1` for no, `2` for yes). With `1` every seat is
played by a person; otherwise seat 0 is yours and the other seats are
computer players. A game refuses a number of players it cannot seat:

| Game        | Players |
|-------------|---------|
| Bataille    | 2 or more |
| Uno         | 2 to 7  |
| Scopa       | 2 to 4  |
| Briscola    | 2 to 5  |
| 8 Americain | 2 to 5  |

When it is your turn your hand is shown and you pick cards by position,
counting from 0:

- `2` picks one card
- `1..3` picks an interval of cards
- `0,2,4` picks a list of cards
- `pioche` draws a card instead, in Uno and 8 Americain

Which forms are accepted depends on the game and the moment; an entry that
does not fit is refused and you are asked again. When a colour has to be
chosen (a joker in Uno, an eight in 8 Americain) you answer with its number.

Face-down cards are shown as `[]`. Some messages of the games are in French.

## Using the library

The games and the pieces they are built from can be used directly. Every
game takes an `input_fn` that returns the next line typed, an `output`
stream to print to, and (through `Game`) an `rng` for a reproducible deck:

```python
import random

from cardtable.deck import create_deck
from cardtable.movement import MovementKind, parse_movement
from cardtable.piles import Hand

deck = create_deck("Fr", 1, random.Random(7))
hand = Hand()
for _ in range(5):
    hand.add(deck.deal())

picked = hand.remove(parse_movement("0..1", MovementKind.INTERVAL))
```

`Hand.remove` takes the positions one after another, each counted in the
hand as it stands after the previous card was taken.

Card kinds understood by `create_cards` and `create_deck` are `"Fr"`,
`"It"` and `"Uno"`; any other name raises `UnknownCardType`. Input that
cannot be read as a selection raises `IllegalEntry`; all errors of the
package derive from `CardGameError` in `cardtable.errors`.

`cardtable.cli.create_game(choice, n_players, ai)` builds the game the menu
would start, and `Game.run()` plays it to the end and returns the winner's
seat.

## What it does not do

Games are played in a single terminal only: there is no network play, no
saving or resuming of a game, and no record of past scores. The computer
players follow a fixed rule (play the first card, draw once every card has
been tried) rather than any strategy.

## Running the tests

```
pip install .[test]
pytest
```