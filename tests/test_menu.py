import curses

import pytest

from flightdesk.entities import Catalogs, Hotel
from flightdesk.menu import (
    input_help,
    page_count,
    page_lines,
    query_description,
    run_menu,
    wrap_centered,
)

ESC = 27
ENTER = 10


class FakeScreen:
    def __init__(self, keys, size=(40, 160)):
        self.keys = list(keys)
        self.size = size
        self.writes = []

    def keypad(self, flag):
        pass

    def clear(self):
        pass

    def refresh(self):
        pass

    def move(self, y, x):
        pass

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))

    def getch(self):
        if not self.keys:
            raise AssertionError("ran out of keys")
        return self.keys.pop(0)

    def text(self):
        return "\n".join(text for _, _, text in self.writes)


def typed(text):
    return [ord(c) for c in text] + [ENTER]


def catalogs_with_hotel():
    return Catalogs(hotels={"HTL1001": Hotel(id="HTL1001", rating=4.5)})


def test_query_description_title():
    title, body = query_description(1)
    assert title == "Query 1 - Resumo de dados"
    assert len(body) == 2


def test_every_query_has_description_and_help():
    for query in range(1, 11):
        title, _ = query_description(query)
        help_title, lines = input_help(query)
        assert title.startswith(f"Query {query} ")
        assert help_title.startswith(f"Query {query} ")
        assert any(line.startswith("Exemplo:") for line in lines)


def test_input_help_syntax_line():
    _, lines = input_help(5)
    assert "INPUT : 5{F} <Identificador> <Data inicial> <Data final>" in lines


@pytest.mark.parametrize("query", [0, 11, -1])
def test_unknown_query_rejected(query):
    with pytest.raises(ValueError):
        query_description(query)
    with pytest.raises(ValueError):
        input_help(query)


def test_wrap_short_text_single_piece():
    pieces = wrap_centered("abc", 11)
    assert [piece for _, piece in pieces] == ["abc"]
    x, _ = pieces[0]
    assert x + len("abc") + x in (11, 10)


def test_wrap_long_text_round_trip():
    text = "x" * 57
    pieces = wrap_centered(text, 10)
    assert "".join(piece for _, piece in pieces) == text
    assert all(len(piece) <= 9 for _, piece in pieces)
    assert all(x >= 0 for x, _ in pieces)


def test_wrap_text_as_wide_as_screen_is_cut():
    pieces = wrap_centered("abcdefghij", 10)
    assert [piece for _, piece in pieces] == ["abcdefghi", "j"]


def test_wrap_rejects_tiny_width():
    with pytest.raises(ValueError):
        wrap_centered("abc", 1)


def test_pages_cover_all_lines():
    lines = [f"line {n}" for n in range(23)]
    count = page_count(lines, 5)
    joined = [line for page in range(1, count + 1) for line in page_lines(lines, page, 5)]
    assert joined == lines
    assert page_lines(lines, count + 1, 5) == []


def test_empty_results_have_one_page():
    assert page_count([], 5) == 1


def test_page_arguments_checked():
    with pytest.raises(ValueError):
        page_count(["a"], 0)
    with pytest.raises(ValueError):
        page_lines(["a"], 0, 3)


def test_run_menu_runs_a_query(tmp_path):
    keys = (
        typed("data")
        + [curses.KEY_DOWN, curses.KEY_DOWN, ENTER]
        + typed("3 HTL1001")
        + [ESC, ESC]
    )
    screen = FakeScreen(keys)
    loaded = []

    def load(path):
        loaded.append(path)
        return catalogs_with_hotel()

    assert run_menu(screen, load, tmp_path) == 1
    assert loaded == ["data"]
    assert (tmp_path / "command1_output.txt").read_text() == "4.500\n"
    assert "RESULTADO" in screen.text()
    assert "4.500" in screen.text()


def test_run_menu_reports_bad_path(tmp_path):
    attempts = []

    def load(path):
        attempts.append(path)
        if path == "bad":
            raise FileNotFoundError(path)
        return catalogs_with_hotel()

    keys = typed("bad") + typed("good") + [ESC, ESC]
    screen = FakeScreen(keys)
    assert run_menu(screen, load, tmp_path) == 0
    assert attempts == ["bad", "good"]
    assert "Path errado. Escreve de novo!" in screen.text()


def test_run_menu_reports_invalid_input(tmp_path):
    keys = (
        typed("data")
        + [curses.KEY_UP, ENTER]
        + typed("10 1800")
        + [ESC, ESC, ESC]
    )
    screen = FakeScreen(keys)
    assert run_menu(screen, lambda path: Catalogs(), tmp_path) == 0
    assert "Segundo argumento inválido." in screen.text()
    assert not list(tmp_path.iterdir())


def test_run_menu_backspace_edits_input(tmp_path):
    keys = (
        typed("data")
        + [curses.KEY_DOWN, curses.KEY_DOWN, ENTER]
        + [ord(c) for c in "3 HTL1001X"] + [curses.KEY_BACKSPACE, ENTER]
        + [ESC, ESC]
    )
    screen = FakeScreen(keys)
    assert run_menu(screen, lambda path: catalogs_with_hotel(), tmp_path) == 1
    assert (tmp_path / "command1_output.txt").read_text() == "4.500\n"