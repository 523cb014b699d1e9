"""Menu-driven command line for the Tower of Hanoi game."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from hanoitower.history import DEFAULT_PATH, History
from hanoitower.towers import _TokenReader, help_text, play

MENU = (
    "\n=== Torre de Hanoi ===\n"
    "1. Jogar\n2. Exibir historico\n3. Buscar por nome\n"
    "4. Buscar por data\n5. Ajuda\n6. Sair\n"
)


def _prompt(out: TextIO, text: str) -> None:
    print(text, end="", file=out, flush=True)


def run(
    input_func: Callable[[], str] | None = None,
    out: TextIO | None = None,
    history_path: str = DEFAULT_PATH,
) -> int:
    """Show the main menu until the player leaves or input ends."""
    if out is None:
        out = sys.stdout
    reader = _TokenReader(input if input_func is None else input_func)
    history = History()
    history.load(history_path)
    try:
        while True:
            out.write(MENU)
            _prompt(out, "Escolha uma opcao: ")
            option = reader.integer()
            if option == 1:
                play(history, reader, out, history_path)
            elif option == 2:
                history.show(out)
            elif option == 3:
                _prompt(out, "Digite o nome para busca: ")
                history.search_name(reader.word(), out)
            elif option == 4:
                _prompt(out, "Digite a data (ex: 06/06/2025): ")
                history.search_date(reader.word(), out)
            elif option == 5:
                out.write(help_text())
            elif option == 6:
                print("Saindo", file=out)
                return 0
            else:
                print("Opção invalida!", file=out)
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hanoitower", description="Torre de Hanoi")
    parser.add_argument(
        "--history",
        default=DEFAULT_PATH,
        help="history file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    return run(history_path=args.history)


if __name__ == "__main__":
    sys.exit(main())