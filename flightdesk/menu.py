"""Interactive curses menu for choosing, typing and viewing queries."""

from __future__ import annotations

import curses
import math
from collections.abc import Callable, Sequence
from pathlib import Path

from flightdesk.entities import Catalogs
from flightdesk.query_manager import process_line
from flightdesk.validation import InvalidInputError, validate_input

_ESC = 27
_ENTER_KEYS = frozenset({10, 13, curses.KEY_ENTER})
_BACKSPACE_KEYS = frozenset({8, 127, curses.KEY_BACKSPACE})
_MAX_INPUT = 63
_PATH_BOX_HEIGHT = 3
_PATH_BOX_WIDTH = 64
_HIGHLIGHT = curses.A_BOLD | curses.A_STANDOUT

_DESCRIPTIONS: dict[int, tuple[str, tuple[str, ...]]] = {
    1: ("Query 1 - Resumo de dados", (
        "Listar o resumo de um utilizador, voo, ou reserva, consoante o identificador recebido por argumento.",
        "Garantido que não existem identificadores repetidos entre as diferentes entidades.",
    )),
    2: ("Query 2 - Listar voos e reservas de utilizador", (
        "Listar os voos ou reservas de um utilizador, se o segundo argumento for flights ou reservations,respetivamente, ordenados por data.",
        "Caso não seja fornecido um segundo argumento, apresentar voos e reservas, juntamente com o tipo.",
    )),
    3: ("Query 3 - Classificação média de um hotel.", (
        "Apresentar a classificação média de um hotel, a partir do seu identificador.",
    )),
    4: ("Query 4 - Listar as reservas de um hotel num intervalo de tempo", (
        "Listar as reservas de um hotel, ordenadas por data de início.",
        "Caso duas reservas tenham a mesma data, deve ser usado o identificador da reserva como critério de desempate.",
    )),
    5: ("Query 5 - Voos com origem num aeropoto num intervalo de tempo", (
        "Listar os voos com origem num dado aeroporto, entre duas datas, ordenados por data de partida estimada.",
        "Caso dois voos tenham a mesma data, o identificador do voo deverá ser usado como critério de desempate.",
    )),
    6: ("Query 6 - Listar top N aeroportos por número de passageiros", (
        "Listar o top N aeroportos com mais passageiros, para um dado ano. Deverão ser contabilizados os voos com a data estimada de partida nesse ano.",
        "Caso dois aeroportos tenham o mesmo valor, deverá ser usado o nome do aeroporto como critério de desempate.",
    )),
    7: ("Query 7 - Listar o top N aeroportos com a maior mediana de atrasos", (
        "Listar o top N aeroportos com a maior mediana de atrasos (diferença entre a data estimada e a data real de partida).",
        "Caso dois aeroportos tenham a mesma mediana, o nome do aeroporto deverá ser usado como critério de desempate.",
    )),
    8: ("Query 8 - Receita total de um hotel num intervalo de tempo", (
        "Apresentar a receita total de um hotel entre duas datas (inclusive), a partir do seu identificador.",
        "As receitas de um hotel devem considerar apenas o preço por noite de todas as reservas com noites entre as duas datas.",
    )),
    9: ("Query 9 - Listar utilizadores por prefixo do nome", (
        "Listar todos os utilizadores cujo nome começa com o prefixo passado por argumento, ordenados por nome.",
        "Utilizadores inativos não deverão ser considerados pela pesquisa.",
    )),
    10: ("Query 10 - Apresentação de métricas gerais", (
        "Métricas são número de novos utilizadores registados; número de voos; número de passageiros; número de passageiros únicos; e número de reservas.",
    )),
}

_NOT_FOUND = "Caso não exista, será apresentada uma mensagem de erro."
_OPTIONAL_F = "{F} apenas mostra os resultados de forma estruturada, pode retirar"

_HELP: dict[int, tuple[str, tuple[str, ...], str, str]] = {
    1: ("Query 1 - Resumo de dados", (
        "Para executar esta query, escreva o identificador do utilizador, voo ou reserva correspondente.",
        _NOT_FOUND,
    ), "INPUT : 1{F} <Identificador>", "Exemplo: 1F DGarcia429, "),
    2: ("Query 2 - Listar voos ou reservas de utilizador", (
        "Para executar esta query, escreva o identificador do utilizador e tipo correspondente.",
        _NOT_FOUND,
    ), "INPUT: 2{F} <Identificador> <Tipo (flights ou reservations)>",
        "Exemplo: 2F JéssiTavares910 flights, "),
    3: ("Query 3 - Classificação média de um hotel.", (
        "Para executar esta query, escreva o identificador do hotel correspondente.",
        _NOT_FOUND,
    ), "INPUT : 3{F} <Identificador>", "Exemplo: 3F HTL1001, "),
    4: ("Query 4 - Listar as reservas de um hotel num intervalo de tempo", (
        "Para executar esta query, escreva o identificador do hotel correspondente.",
        _NOT_FOUND,
    ), "INPUT : 4{F} <Identificador>", "Exemplo: 4F HTL1003, "),
    5: ("Query 5 - Voos com origem num aeroporto num intervalo de tempo", (
        "Para executar esta query, escreva o identificador do aeroporto e datas correspondentes.",
        _NOT_FOUND,
    ), "INPUT : 5{F} <Identificador> <Data inicial> <Data final>",
        'Exemplo: 5F LIS "2021/01/01 00:00:00" "2022/12/31 23:59:59", '),
    6: ("Query 6 - Listar top N aeroportos por número de passageiros", (
        "Para executar esta query, escreva o ano e número de aeroportos correspondentes.",
        _NOT_FOUND,
    ), "INPUT : 6{F} <Ano> <Número de aeroportos>", "Exemplo: 6F 2021 10, "),
    7: ("Query 7 - Listar o top N aeroportos com a maior mediana de atrasos", (
        "Para executar esta query, escreva o número de aeroportos correspondente.",
        _NOT_FOUND,
    ), "INPUT : 7{F} <Número de aeroportos>", "Exemplo: 7F 20, "),
    8: ("Query 8 - Receita total de um hotel num intervalo de tempo", (
        "Para executar esta query, escreva o identificador do hotel e datas correspondentes.",
        _NOT_FOUND,
    ), "INPUT : 8{F} <Identificador> <Data inicial> <Data final>",
        "Exemplo: 8F HTL1001 2023/05/02 2023/05/02, "),
    9: ("Query 9 - Listar utilizadores por prefixo do nome", (
        "Para executar esta query, escreva o prefixo do nome correspondente.",
    ), "INPUT : 9{F} <Prefixo>", "Exemplo: 9F Julia, "),
    10: ("Query 10 - Métricas gerais da aplicação", (
        "Para executar esta query, pode não escrever nada e terá todas as métricas.",
        "Ou pode escrever apenas o ano, ou ano e mês para obter para os intervalos desejados.",
    ), "INPUT : 10{F} [ano [mês]]", "Exemplo: 10F 2023 10, "),
}

_CHOICE_HEADER = (
    "Escolhe a opção que pretendes executar",
    None,
    "Clica [KEY UP] ou [KEY DOWN] para mudar de opção.",
    "Clica [ESC] para sair. Clica [ENTER] para executar a página pretendida",
    None,
)

_INPUT_ERRORS: dict[int | None, str] = {
    None: "Número de argumentos inválido.",
    1: "Primeiro argumento inválido.",
    2: "Segundo argumento inválido.",
    3: "Terceiro argumento inválido.",
    4: "Quarto argumento inválido.",
}
_RESULTS_FILE_ERROR = "Erro ao abrir ficheiro de resultados."


def _check_query(query: int) -> None:
    if query not in _DESCRIPTIONS:
        raise ValueError(f"no such query: {query!r}")


def query_description(query: int) -> tuple[str, tuple[str, ...]]:
    """Title and description lines shown when choosing a query."""
    _check_query(query)
    return _DESCRIPTIONS[query]


def input_help(query: int) -> tuple[str, tuple[str, ...]]:
    """Title and help lines shown while typing a query; empty strings are gaps."""
    _check_query(query)
    title, explanation, syntax, example = _HELP[query]
    return title, (*explanation, "", "", syntax, example + _OPTIONAL_F)


def wrap_centered(text: str, width: int) -> list[tuple[int, str]]:
    """Split text into pieces that fit the width, each with its centred column.

    Text as wide as the screen or wider is cut into pieces of width - 1.
    """
    if width < 2:
        raise ValueError("width must be at least 2")
    if len(text) < width:
        pieces = [text]
    else:
        step = width - 1
        pieces = [text[start:start + step] for start in range(0, len(text), step)]
    return [((width - len(piece)) // 2, piece) for piece in pieces]


def page_count(lines: Sequence[str], page_size: int) -> int:
    """Number of pages needed to show the lines; at least one."""
    if page_size < 1:
        raise ValueError("page size must be positive")
    return max(1, math.ceil(len(lines) / page_size))


def page_lines(lines: Sequence[str], page: int, page_size: int) -> list[str]:
    """The lines on a 1-based page."""
    if page_size < 1:
        raise ValueError("page size must be positive")
    if page < 1:
        raise ValueError("pages are numbered from 1")
    start = (page - 1) * page_size
    return list(lines[start:start + page_size])


# ---------------------------------------------------------------- drawing

def _color(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _setup_colors() -> None:
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_WHITE)
        curses.init_pair(2, curses.COLOR_RED, curses.COLOR_WHITE)
        curses.init_pair(3, curses.COLOR_RED, curses.COLOR_BLACK)
    except curses.error:
        pass


def _cursor(visible: bool) -> None:
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        pass


def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    if y < 0 or x < 0:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _center(screen, text: str, y: int, attr: int = 0) -> int:
    width = max(screen.getmaxyx()[1], 2)
    for x, piece in wrap_centered(text, width):
        _put(screen, y, x, piece, attr)
        y += 1
    return y


def _read_line(screen, y: int, x: int) -> str | None:
    """Read typed characters until Enter; None when Escape is pressed."""
    chars: list[str] = []
    while True:
        key = screen.getch()
        if key in _ENTER_KEYS:
            return "".join(chars)
        if key == _ESC:
            return None
        if 32 <= key < 127:
            if len(chars) < _MAX_INPUT:
                chars.append(chr(key))
                _put(screen, y, x + len(chars), chr(key))
        elif key in _BACKSPACE_KEYS and chars:
            _put(screen, y, x + len(chars), " ")
            screen.move(y, x + len(chars))
            chars.pop()
        screen.refresh()


def _ask_path(screen, show_error: bool) -> str | None:
    rows, cols = screen.getmaxyx()
    top = (rows - _PATH_BOX_HEIGHT) // 2
    left = max((cols - _PATH_BOX_WIDTH) // 2, 0)
    screen.clear()
    backdrop = _color(1)
    for y in range(top - 5, top + _PATH_BOX_HEIGHT + 5):
        _put(screen, y, max(left - 5, 0), " " * (_PATH_BOX_WIDTH + 8), backdrop)
    for y in range(top, top + _PATH_BOX_HEIGHT):
        _put(screen, y, left, " " * _PATH_BOX_WIDTH)
    _put(screen, top - 2, left, "Indica o Path para o dataset: ", backdrop)
    _put(screen, top + _PATH_BOX_HEIGHT + 2, left, "(Exemplo: dataset/data_clean)", backdrop)
    _put(screen, top + _PATH_BOX_HEIGHT + 3, left, "Clica [ESC] para sair.", backdrop)
    if show_error:
        _put(screen, top + _PATH_BOX_HEIGHT + 1, left, "Path errado. Escreve de novo!", _color(2))
    _cursor(True)
    screen.move(top + 1, left + 1)
    screen.refresh()
    path = _read_line(screen, top + 1, left)
    _cursor(False)
    return path


def _draw_choice(screen, query: int) -> None:
    rows = screen.getmaxyx()[0]
    y = (rows - 4) // 2 - 7
    for line in _CHOICE_HEADER:
        y = y + 1 if line is None else _center(screen, line, y, _HIGHLIGHT)
    title, body = query_description(query)
    y = _center(screen, title, y, _HIGHLIGHT) + 2
    for line in body:
        y = _center(screen, line, y)


def _draw_help(screen, query: int) -> None:
    rows = screen.getmaxyx()[0]
    y = (rows - 4) // 2 - 6
    title, body = input_help(query)
    y = _center(screen, title, y, _HIGHLIGHT) + 2
    for line in body:
        y = y + 1 if not line else _center(screen, line, y)


def _ask_query(screen, query: int, results_error: bool) -> str | None:
    """Read a command line for the query until it is valid; None on Escape."""
    message = _RESULTS_FILE_ERROR if results_error else None
    rows, cols = screen.getmaxyx()
    left = max((cols - 50) // 2, 0)
    while True:
        screen.clear()
        _draw_help(screen, query)
        y = (rows - 4) // 2 + 9
        y = _center(screen, "|ESCREVA O SEU INPUT AQUI|", y)
        y = _center(screen, "V                        V", y)
        input_row = y + 1
        if message:
            _center(screen, message, y + 2, _color(3))
        _cursor(True)
        screen.move(input_row, left + 1)
        screen.refresh()
        line = _read_line(screen, input_row, left)
        _cursor(False)
        if line is None:
            return None
        try:
            validate_input(query, line)
        except InvalidInputError as error:
            message = _INPUT_ERRORS.get(error.argument, _INPUT_ERRORS[None])
            continue
        return line


def _show_results(screen, path: Path) -> bool:
    """Page through a results file; False when it cannot be read."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return False
    rows, cols = screen.getmaxyx()
    size = max(rows - 6, 1)
    margin = cols // 10
    page = 1
    redraw = True
    while True:
        if redraw:
            screen.clear()
            _center(screen, "RESULTADO", 1, _HIGHLIGHT)
            for row, line in enumerate(page_lines(lines, page, size), start=2):
                _put(screen, row, margin, line)
            _center(screen, "[KEY UP] or [KEY DOWN] to navigate, [ESC] to exit", rows - 2)
            screen.refresh()
        redraw = True
        key = screen.getch()
        if key == curses.KEY_UP and page > 1:
            page -= 1
        elif key == curses.KEY_DOWN and page < page_count(lines, size):
            page += 1
        elif key == _ESC:
            return True
        else:
            redraw = False


def _session(screen, catalogs: Catalogs, output_dir, executed: int) -> int:
    """Choose and run queries until Escape; returns the running command count."""
    query = 1
    results_error = False
    while True:
        screen.clear()
        _draw_choice(screen, query)
        screen.refresh()
        key = screen.getch()
        if key == curses.KEY_UP:
            query = 10 if query == 1 else query - 1
        elif key == curses.KEY_DOWN:
            query = 1 if query == 10 else query + 1
        elif key in _ENTER_KEYS:
            line = _ask_query(screen, query, results_error)
            results_error = False
            if line is None:
                continue
            executed += 1
            result = process_line(line, executed, catalogs, output_dir)
            results_error = not _show_results(screen, result)
        elif key == _ESC:
            return executed


def run_menu(screen, load_catalogs: Callable[[str], Catalogs], output_dir="Resultados") -> int:
    """Run the interactive menu on a curses window.

    ``load_catalogs`` reads the dataset at the typed path and raises OSError
    when it cannot. Leaving the query list goes back to the path prompt until
    a query has been run, after which it ends the menu. Returns the number of
    queries run.
    """
    screen.keypad(True)
    _setup_colors()
    executed = 0
    path_error = False
    while True:
        path = _ask_path(screen, path_error)
        if path is None:
            return executed
        try:
            catalogs = load_catalogs(path)
        except OSError:
            path_error = True
            continue
        path_error = False
        executed = _session(screen, catalogs, output_dir, executed)
        if executed:
            return executed