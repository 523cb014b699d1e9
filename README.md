# hanoitower

A Tower of Hanoi game for the terminal. You move discs between three towers
and try to get the whole stack from Tower A to Tower C. Each game you win is
written to a history file, and you can list or search that history. The
program's messages are in Portuguese.

## Installation

```
pip install .
```

## Playing

Start the game with:

```
hanoitower
```

To keep the history in a different file, pass its path:

```
hanoitower --history partidas.txt
```

The main menu has these options:

1. Play (`Jogar`)
2. Show the history (`Exibir historico`)
3. Search the history by player name (`Buscar por nome`)
4. Search the history by date, for example `06/06/2025` (`Buscar por data`)
5. Help (`Ajuda`)
6. Quit (`Sair`)

The program also stops when its input ends.

When a game starts, you enter your name (a single word) and the number of
discs. The prompt suggests 3 to 8 discs; any whole number is accepted.
During the game you can type:

- `A B`: move the top disc of Tower A onto Tower B. Any two of A, B and C
  work, in upper or lower case.
- `R`: restart the current game and zero the move counter.
- `S`: leave the game without saving it.

You cannot put a larger disc on top of a smaller one, and you cannot move from
an empty tower. The game is won when every disc is on Tower C.

## History

Each game you win is saved to `historico.txt` in the current directory, or to
the file given with `--history`. The newest game comes first. Each line holds
the player's name, the date and time (`dd/mm/yyyy HH:MM`), the number of discs
and the number of moves:

```
Nome: ana  | Data: 06/06/2025 14:30  | Modo: 3 discos  | Movimentos: 7
```

The file is read when the program starts; a missing file means an empty
history. Searching by name matches any part of a name. Searching by date
compares the first ten characters, that is, the day.

## Using it from Python

`hanoitower.towers.Game` holds the state of a game. `Game.move` takes tower
numbers 1 to 3 and raises `MoveError` for a move that breaks the rules;
`Game.is_won` and `Game.reset` do what their names say. `render_towers`
draws the towers as text and `help_text` returns the help screen.

`hanoitower.history.History` stores finished matches as `Record` objects,
newest first. `History.add` records a game, `save` and `load` write and read
the history file, and `find_by_name` and `find_by_date` return matching
records.

```python
from hanoitower.history import History
from hanoitower.towers import Game, MoveError

game = Game("ana", 3)
game.move(1, 3)
try:
    game.move(1, 3)  # a larger disc onto a smaller one
except MoveError as exc:
    print(exc)

history = History()
history.add("ana", 7, 3)
print(history.find_by_name("an"))
```

`hanoitower.cli.run` runs the whole menu and takes an input function and an
output stream, so it can be driven without a terminal.

## Running the tests

```
pip install ".[test]"
pytest
```