# flightdesk

flightdesk answers a fixed set of questions about a travel catalogue made of
users, flights, reservations, hotels and airports, plus day, month and year
activity counters. Each question is a single query line; the answer is plain
text, either as compact `;`-separated rows or, with the `F` suffix on the
query number, as numbered labelled blocks (`--- 1 ---`, `name: ...`, and so on).

## Queries

| Line                                   | Answer                                                             |
|----------------------------------------|--------------------------------------------------------------------|
| `1 <id>`                               | Summary of a user, flight or reservation                           |
| `2 <user> [flights\|reservations]`     | A user's flights and/or reservations, newest first                 |
| `3 <hotel>`                            | Average rating of a hotel                                          |
| `4 <hotel>`                            | Reservations of a hotel, newest begin date first, ties by id       |
| `5 <airport> "<begin>" "<end>"`        | Flights leaving an airport between two date-times, newest first    |
| `6 <year> <N>`                         | Top N airports by passengers in a year, ties by name               |
| `7 <N>`                                | Top N airports by median departure delay, ties by name             |
| `8 <hotel> <begin> <end>`              | Revenue of a hotel between two dates, inclusive                    |
| `9 <prefix>`                           | Active users whose name starts with a prefix, ordered by name      |
| `10 [year [month]]`                    | New users, flights, passengers, unique passengers and reservations |

Append `F` to the query number (`1F`, `10F`, ...) for the labelled layout.
Flight ids are all digits and reservation ids start with `Book`; any other id
in query 1 is looked up as a user. Unknown ids and inactive users give an
empty answer.

## Using it from Python

The catalogue is a `flightdesk.entities.Catalogs` object: dictionaries of
`User`, `Flight`, `Reservation`, `Hotel` and `Airport` records keyed by id,
and `metrics`, a dictionary of `YearMetric` (holding `MonthMetric`, holding
`DayMetric`) keyed by year.

```python
from flightdesk.entities import Catalogs, Hotel
from flightdesk.query_manager import run_query, run_queries

catalogs = Catalogs(hotels={"HTL1001": Hotel(id="HTL1001", rating=4.25)})

print(run_query("3F HTL1001", catalogs), end="")
# --- 1 ---
# rating: 4.250

# Answer a whole file of queries; line N goes to commandN_output.txt
with open("queries.txt", encoding="utf-8") as lines:
    paths = run_queries(lines, catalogs, "Resultados")
```

`run_query` returns the answer as a string and raises `ValueError` for
arguments a query cannot read. `process_line(line, number, catalogs,
output_dir)` writes the answer to `output_dir/command<number>_output.txt`;
when a query rejects its arguments the error is printed on stderr and the file
is left empty. An unknown query number gives an empty answer.

Each query also has its own function taking `(catalogs, arguments,
formatted)`, for example
`flightdesk.hotels.hotel_revenue(catalogs, "HTL1001 2023/05/02 2023/05/02", formatted=True)`
or `flightdesk.users_search.users_by_prefix(catalogs, "Julia", formatted=False)`.
The others are `summary.query_one`, `user_lists.user_flights_reservations`,
`hotels.hotel_rating`, `hotels.hotel_reservations`,
`airports.flights_from_airport`, `airports.top_airports_by_passengers`,
`airports.top_airports_by_median` and `metrics.general_metrics`.

## Checking input

`flightdesk.validation.validate_input(query, text)` checks a query line typed
for a given query number and returns its arguments as a tuple. It raises
`flightdesk.validation.InvalidInputError`, whose `argument` attribute is the
1-based position of the wrong argument (the query number is argument 1), or
`None` when the number of arguments is wrong:

```python
from flightdesk.validation import InvalidInputError, validate_input

try:
    validate_input(6, "6F 1800 10")
except InvalidInputError as error:
    print(error.argument)   # 2
```

## Interactive menu

`flightdesk.menu.run_menu(screen, load_catalogs, output_dir="Resultados")`
drives a curses window, for example through `curses.wrapper`. It asks for a
dataset path and passes it to `load_catalogs`, which must return a `Catalogs`
and raise `OSError` when the path cannot be read (the prompt is then shown
again). The arrow keys pick a query, Enter shows what it expects and reads
the line, which is checked with `validate_input`; the answer is written with
`process_line` and paged with `[KEY UP]`/`[KEY DOWN]`. `[ESC]` goes back a
step; leaving the query list returns to the path prompt until a query has
been run, after which the menu ends. It returns the number of queries run.
The screen texts are in Portuguese.

The helpers behind it (`query_description`, `input_help`, `wrap_centered`,
`page_count`, `page_lines`) can be used on their own.

## What it does not do

flightdesk does not read dataset files: it has no CSV loader and no
validation of raw records, so building the `Catalogs` (including the
per-airport delays and yearly passenger counts and the metrics) is up to the
caller, as is the `load_catalogs` function given to the menu. It installs no
command-line program.

## Tests

Install with the `test` extra and run `pytest` from the project directory.