"""Towers, discs and the interactive Tower of Hanoi game."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, Iterator, TextIO

from hanoitower.history import DEFAULT_PATH, History

DISC_WIDTH = 2
TOWER_NAMES = ("A", "B", "C")


class MoveError(ValueError):
    """Raised when a move breaks the rules of the game."""


class Tower:
    """A stack of discs, iterated from the base to the top."""

    def __init__(self) -> None:
        self._discs: list[int] = []

    def push(self, disc: int) -> None:
        self._discs.append(disc)

    def pop(self) -> int:
        if not self._discs:
            raise IndexError("Pilha vazia!")
        return self._discs.pop()

    def top(self) -> int | None:
        """Return the top disc, or None if the tower is empty."""
        return self._discs[-1] if self._discs else None

    def __len__(self) -> int:
        return len(self._discs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._discs)

    def clear(self) -> None:
        self._discs.clear()


class Game:
    """A game in progress: three towers, a disc count and a move counter."""

    def __init__(self, player: str, num_discs: int) -> None:
        self.player = player
        self.num_discs = num_discs
        self.towers = (Tower(), Tower(), Tower())
        self.moves = 0
        self.reset()

    def reset(self) -> None:
        """Put every disc back on the first tower and zero the move counter."""
        for tower in self.towers:
            tower.clear()
        for disc in range(self.num_discs, 0, -1):
            self.towers[0].push(disc)
        self.moves = 0

    def is_won(self) -> bool:
        return len(self.towers[2]) == self.num_discs

    def move(self, origin: int, destination: int) -> None:
        """Move the top disc between towers numbered 1 to 3."""
        if not (1 <= origin <= 3 and 1 <= destination <= 3):
            raise MoveError("Torres invalidas! Use A, B ou C.")
        source = self.towers[origin - 1]
        target = self.towers[destination - 1]
        if not source:
            raise MoveError("Torre de origem vazia!")
        disc = source.pop()
        below = target.top()
        if below is not None and disc > below:
            source.push(disc)
            raise MoveError(
                "Movimento invalido: disco maior não pode ser colocado sobre disco menor!"
            )
        target.push(disc)
        self.moves += 1


def render_disc(disc: int, max_width: int) -> str:
    """Render one level of a tower: a disc, or the bare rod when ``disc`` is 0."""
    if disc == 0:
        middle = max_width // 2
        return "".join("|" if i == middle else " " for i in range(max_width))
    width = disc * DISC_WIDTH
    left = max(max_width - width, 0) // 2
    right = max_width - left - width
    return " " * left + "=" * width + " " * right


def render_towers(towers: Iterable[Tower], height: int) -> str:
    """Render three towers side by side, with base and labels."""
    width = height * DISC_WIDTH
    stacks = [list(tower) for tower in towers]
    lines = [""]
    for row in range(height):
        level = height - row - 1
        cells = [
            render_disc(stack[level] if level < len(stack) else 0, width)
            for stack in stacks
        ]
        lines.append("    ".join(cells))
    lines.append(("-" * width + "    ") * 3)
    label_width = max(width, 0)
    lines.append(
        "   ".join(f"{' Torre ' + name:<{label_width}}" for name in TOWER_NAMES)
    )
    return "\n".join(lines) + "\n"


def help_text() -> str:
    return (
        "\n===== AJUDA =====\n"
        "Objetivo do jogo: Mover todos os discos da Torre A para a Torre C\n"
        "Regras:\n"
        " - So e possivel mover o topo de uma torre por vez\n"
        " - Nao e permitido colocar um disco maior sobre um menor\n\n"
        "Comandos:\n"
        " A B -> Move o topo da Torre A para a Torre B\n"
        " R -> Reinicia o jogo\n"
        " S -> Sai do jogo\n"
        "==============\n\n"
    )


class _TokenReader:
    """Hands out words, characters and integers from line-based input."""

    _INTEGER = re.compile(r"[+-]?\d+")

    def __init__(self, input_func: Callable[[], str]) -> None:
        self._input = input_func
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            self._buffer = self._input() + "\n"

    def word(self) -> str:
        self._skip_space()
        word = self._buffer.split(maxsplit=1)[0]
        self._buffer = self._buffer[len(word):]
        return word

    def char(self) -> str:
        self._skip_space()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def integer(self) -> int | None:
        """Read an integer; an unreadable word is consumed and None returned."""
        self._skip_space()
        match = self._INTEGER.match(self._buffer)
        if match is None:
            self.word()
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())


def _prompt(out: TextIO, text: str) -> None:
    print(text, end="", file=out, flush=True)


def play(
    history: History,
    input_func: Callable[[], str] | _TokenReader | None = None,
    out: TextIO | None = None,
    history_path: str = DEFAULT_PATH,
) -> Game:
    """Run one interactive game; a win is added to the history and saved."""
    if out is None:
        out = sys.stdout
    if isinstance(input_func, _TokenReader):
        reader = input_func
    else:
        reader = _TokenReader(input if input_func is None else input_func)

    _prompt(out, "Digite seu nome: ")
    player = reader.word()
    while True:
        _prompt(out, "Digite o numero de discos (3-8): ")
        num_discs = reader.integer()
        if num_discs is not None:
            break
        print("Numero de discos invalido!", file=out)

    game = Game(player, num_discs)
    while True:
        out.write(render_towers(game.towers, game.num_discs))
        print(f"Movimentos: {game.moves}", file=out)
        if game.is_won():
            print(
                f"Parabens, {player}! Voce venceu em {game.moves} movimentos!",
                file=out,
            )
            history.add(player, game.moves, game.num_discs)
            history.save(history_path)
            break

        _prompt(
            out,
            "Digite a torre de origem e destino (ex: A B) ou 'R' para reiniciar, "
            "'S' para sair: ",
        )
        option = reader.char().upper()
        if option == "R":
            game.reset()
            print("Jogo reiniciado!", file=out)
            continue
        if option == "S":
            break
        if option not in TOWER_NAMES:
            print("Torre de origem invalida! Use A, B ou C.", file=out)
            continue
        destination = reader.char().upper()
        if destination not in TOWER_NAMES:
            print("Torre de destino invalida! Use A, B ou C.", file=out)
            continue
        try:
            game.move(TOWER_NAMES.index(option) + 1, TOWER_NAMES.index(destination) + 1)
        except MoveError as error:
            print(error, file=out)
    return game