import pytest

from flightdesk.entities import Catalogs, Hotel, Reservation
from flightdesk.hotels import (
    date_number,
    hotel_rating,
    hotel_reservations,
    hotel_revenue,
    reservation_revenue,
)


def _reservation(rid, begin, end, price=100, nights=0, rating=3, total=0.0):
    return Reservation(
        rid, user_id="JTavares910", hotel_id="HTL1001", begin_date=begin,
        end_date=end, price_per_night=price, rating=rating, nights=nights,
        total_price=total,
    )


@pytest.fixture
def catalogs():
    cat = Catalogs()
    reservations = [
        _reservation("Book0000000002", "2023/05/01", "2023/05/05", nights=4, total=420.5),
        _reservation("Book0000000001", "2023/05/01", "2023/05/03", nights=2),
        _reservation("Book0000000003", "2023/06/10", "2023/06/12", price=50, nights=2),
    ]
    for reservation in reservations:
        cat.reservations[reservation.id] = reservation
    cat.hotels["HTL1001"] = Hotel(
        "HTL1001", name="Sol", rating=3.5,
        reservations=[r.id for r in reservations],
    )
    return cat


def test_rating_plain_and_formatted(catalogs):
    assert hotel_rating(catalogs, "HTL1001", False) == "3.500\n"
    assert hotel_rating(catalogs, "HTL1001", True) == "--- 1 ---\nrating: 3.500\n"


def test_rating_of_unknown_hotel_is_zero(catalogs):
    assert hotel_rating(catalogs, "HTL9999", False) == "0.000\n"


def test_reservations_newest_first_ties_by_id(catalogs):
    lines = hotel_reservations(catalogs, "HTL1001", False).splitlines()
    assert [line.split(";")[0] for line in lines] == [
        "Book0000000003", "Book0000000001", "Book0000000002",
    ]
    assert lines[2] == "Book0000000002;2023/05/01;2023/05/05;JTavares910;3;420.500"


def test_reservations_formatted_blocks(catalogs):
    text = hotel_reservations(catalogs, "HTL1001", True)
    blocks = text.split("\n\n")
    assert len(blocks) == 3
    assert blocks[0].startswith("--- 1 ---\nid: Book0000000003\n")
    assert text.endswith("total_price: 420.500\n")


def test_reservations_of_unknown_hotel_are_empty(catalogs):
    assert hotel_reservations(catalogs, "HTL9999", True) == ""


def test_date_number_steps_by_day_and_month():
    assert date_number("2023/05/03") - date_number("2023/05/02") == 1
    assert date_number("2023/06/02") - date_number("2023/05/02") == 30
    assert date_number("2023/05/02 10:00:00") == date_number("2023/05/02")


def test_date_number_rejects_garbage():
    with pytest.raises(ValueError):
        date_number("2023-05")


def test_revenue_whole_stay_inside_window(catalogs):
    reservation = catalogs.reservations["Book0000000002"]
    revenue = reservation_revenue(reservation, "2023/04/01", "2023/05/31")
    assert revenue == reservation.price_per_night * reservation.nights


def test_revenue_outside_window_is_zero(catalogs):
    reservation = catalogs.reservations["Book0000000002"]
    assert reservation_revenue(reservation, "2023/07/01", "2023/07/31") == 0


def test_revenue_partial_window_is_bounded(catalogs):
    reservation = catalogs.reservations["Book0000000002"]
    full = reservation_revenue(reservation, "2023/04/01", "2023/05/31")
    part = reservation_revenue(reservation, "2023/05/02", "2023/05/03")
    assert 0 < part < full


def test_hotel_revenue_sums_reservations(catalogs):
    total = hotel_revenue(catalogs, "HTL1001 2023/01/01 2023/12/31", False)
    expected = sum(r.price_per_night * r.nights for r in catalogs.reservations.values())
    assert total == f"{expected}\n"


def test_hotel_revenue_formatted_and_unknown(catalogs):
    assert hotel_revenue(catalogs, "HTL9999 2023/01/01 2023/12/31", True) == (
        "--- 1 ---\nrevenue: 0\n"
    )


def test_hotel_revenue_needs_three_arguments(catalogs):
    with pytest.raises(ValueError):
        hotel_revenue(catalogs, "HTL1001 2023/01/01", False)