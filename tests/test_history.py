from datetime import datetime

from hanoitower.history import History, Record, current_date, parse_line

DATE_FORMAT = "%d/%m/%Y %H:%M"


def make_history():
    history = History()
    history.add("Ana", 7, 3, "05/06/2025 09:00")
    history.add("Bruno", 15, 4, "06/06/2025 10:30")
    history.add("Mariana", 31, 5, "06/06/2025 18:45")
    return history


def _assert_is_now(value, before, after):
    parsed = datetime.strptime(value, DATE_FORMAT)
    assert parsed.strftime(DATE_FORMAT) == value
    assert before.replace(second=0, microsecond=0) <= parsed <= after


def test_format_line_follows_file_layout():
    record = Record(name="Ana", date="06/06/2025 10:00", discs=3, moves=7)
    assert record.format_line() == (
        "Nome: Ana  | Data: 06/06/2025 10:00  | Modo: 3 discos  | Movimentos: 7"
    )


def test_describe_follows_display_layout():
    record = Record(name="Ana", date="06/06/2025 10:00", discs=3, moves=7)
    assert record.describe() == (
        "Nome: Ana | Data: 06/06/2025 10:00 | Movimentos: 7 | Discos: 3"
    )


def test_parse_line_round_trip():
    record = Record(name="Ana", date="06/06/2025 10:00", discs=3, moves=7)
    assert parse_line(record.format_line() + "\n") == record


def test_parse_line_rejects_garbage():
    assert parse_line("nothing to see here") is None
    assert parse_line("Nome: Ana  | Data: 06/06/2025  | Modo: x discos") is None


def test_parse_line_rejects_overlong_name():
    line = f"Nome: {'x' * 40}  | Data: 06/06/2025 10:00  | Modo: 3 discos  | Movimentos: 7"
    assert parse_line(line) is None


def test_add_puts_newest_first():
    history = make_history()
    assert [record.name for record in history] == ["Mariana", "Bruno", "Ana"]
    assert len(history) == 3


def test_add_uses_current_date_by_default():
    history = History()
    before = datetime.now()
    record = history.add("Ana", 7, 3)
    after = datetime.now()
    _assert_is_now(record.date, before, after)
    assert record.name == "Ana"
    assert record.moves == 7
    assert record.discs == 3


def test_current_date_format():
    before = datetime.now()
    value = current_date()
    after = datetime.now()
    _assert_is_now(value, before, after)
    assert len(value) == 16


def test_name_is_truncated():
    history = History()
    record = history.add("n" * 50, 7, 3, "06/06/2025 10:00")
    assert record.name == "n" * 29


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "hist.txt"
    history = make_history()
    history.save(path)
    loaded = History()
    loaded.load(path)
    assert list(loaded) == list(history)


def test_save_and_load_twice_is_stable(tmp_path):
    path = tmp_path / "hist.txt"
    make_history().save(path)
    first = History()
    first.load(path)
    first.save(path)
    second = History()
    second.load(path)
    assert list(second) == list(first)


def test_load_missing_file_leaves_history_empty(tmp_path):
    history = History()
    history.load(tmp_path / "absent.txt")
    assert len(history) == 0


def test_load_skips_bad_lines(tmp_path):
    path = tmp_path / "hist.txt"
    good = Record(name="Ana", date="06/06/2025 10:00", discs=3, moves=7)
    path.write_text("junk\n" + good.format_line() + "\n", encoding="utf-8")
    history = History()
    history.load(path)
    assert list(history) == [good]


def test_find_by_name_is_substring_match():
    history = make_history()
    assert [record.name for record in history.find_by_name("an")] == ["Mariana"]
    assert history.find_by_name("Carlos") == []


def test_find_by_date_compares_day():
    history = make_history()
    names = [record.name for record in history.find_by_date("06/06/2025")]
    assert names == ["Mariana", "Bruno"]


def test_find_by_date_short_query_does_not_match():
    history = make_history()
    assert history.find_by_date("06/06") == []


def test_show_empty(capsys):
    History().show()
    assert "Historico vazio!" in capsys.readouterr().out


def test_show_lists_records(capsys):
    history = make_history()
    history.show()
    output = capsys.readouterr().out
    assert "=== Historico de Partidas ===" in output
    for record in history:
        assert record.describe() in output


def test_search_name_reports_missing(capsys):
    found = make_history().search_name("Zed")
    assert found == []
    assert "Nenhuma partida encontrada para 'Zed'." in capsys.readouterr().out


def test_search_date_prints_matches(capsys):
    history = make_history()
    found = history.search_date("05/06/2025")
    output = capsys.readouterr().out
    assert [record.name for record in found] == ["Ana"]
    assert found[0].describe() in output