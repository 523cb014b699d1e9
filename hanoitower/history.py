"""Match history: records of finished games, kept newest first."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, TextIO

NAME_MAX = 29
DATE_MAX = 19
DATE_FORMAT = "%d/%m/%Y %H:%M"
DEFAULT_PATH = "historico.txt"

_LINE = re.compile(
    r"Nome:\s*([^|]{1,29})\|\s*Data:\s*([^|]{1,19})\|\s*Modo:\s*([+-]?\d+)\s*discos"
    r"\s*\|\s*Movimentos:\s*([+-]?\d+)"
)


def current_date() -> str:
    """Return the local date and time in the history's format."""
    return datetime.now().strftime(DATE_FORMAT)


@dataclass(frozen=True)
class Record:
    """One finished game."""

    name: str
    date: str
    discs: int
    moves: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name[:NAME_MAX])
        object.__setattr__(self, "date", self.date[:DATE_MAX])

    def format_line(self) -> str:
        """Return the line stored in the history file."""
        return (
            f"Nome: {self.name}  | Data: {self.date}  | "
            f"Modo: {self.discs} discos  | Movimentos: {self.moves}"
        )

    def describe(self) -> str:
        """Return the line shown to the player."""
        return (
            f"Nome: {self.name} | Data: {self.date} | "
            f"Movimentos: {self.moves} | Discos: {self.discs}"
        )


def parse_line(line: str) -> Record | None:
    """Parse one history file line, or return None if it does not match."""
    match = _LINE.match(line)
    if match is None:
        return None
    name = match.group(1).strip()
    date = match.group(2).strip()
    if not name or not date:
        return None
    return Record(
        name=name,
        date=date,
        discs=int(match.group(3)),
        moves=int(match.group(4)),
    )


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class History:
    """Finished games, most recent first."""

    def __init__(self) -> None:
        self._records: list[Record] = []

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, name: str, moves: int, discs: int, date: str | None = None) -> Record:
        """Record a finished game at the front of the history."""
        record = Record(
            name=name,
            date=current_date() if date is None else date,
            discs=discs,
            moves=moves,
        )
        self._records.insert(0, record)
        return record

    def save(self, path: str | Path = DEFAULT_PATH) -> None:
        """Write the whole history to a file, replacing its contents."""
        with open(path, "w", encoding="utf-8") as handle:
            for record in self._records:
                handle.write(record.format_line() + "\n")

    def load(self, path: str | Path = DEFAULT_PATH) -> None:
        """Append the records of a history file; a missing file is ignored."""
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.readlines()
        except FileNotFoundError:
            return
        self._records.extend(
            record for record in map(parse_line, lines) if record is not None
        )

    def find_by_name(self, name: str) -> list[Record]:
        """Return the records whose player name contains ``name``."""
        return [record for record in self._records if name in record.name]

    def find_by_date(self, date: str) -> list[Record]:
        """Return the records whose date starts with the same day as ``date``."""
        return [record for record in self._records if record.date[:10] == date[:10]]

    def show(self, out: TextIO | None = None) -> None:
        """Print the whole history."""
        out = _stream(out)
        if not self._records:
            print("Historico vazio!", file=out)
            return
        print("\n=== Historico de Partidas ===", file=out)
        for record in self._records:
            print(record.describe(), file=out)

    def search_name(self, name: str, out: TextIO | None = None) -> list[Record]:
        """Print and return the records matching a name."""
        out = _stream(out)
        print(f"\n=== Resultados da busca por nome '{name}' ===", file=out)
        found = self.find_by_name(name)
        for record in found:
            print(record.describe(), file=out)
        if not found:
            print(f"Nenhuma partida encontrada para '{name}'.", file=out)
        return found

    def search_date(self, date: str, out: TextIO | None = None) -> list[Record]:
        """Print and return the records played on a given day."""
        out = _stream(out)
        print(f"\n=== Resultados da busca por data '{date}' ===", file=out)
        found = self.find_by_date(date)
        for record in found:
            print(record.describe(), file=out)
        if not found:
            print(f"Nenhuma partida encontrada para a data '{date}'.", file=out)
        return found