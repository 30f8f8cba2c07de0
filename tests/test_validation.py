import pytest

from flightdesk.validation import InvalidInputError, validate_input


@pytest.mark.parametrize(
    "query, text, expected",
    [
        (1, "1F DGarcia429", ("DGarcia429",)),
        (1, "1 DGarcia429", ("DGarcia429",)),
        (2, "2F JéssiTavares910 flights", ("JéssiTavares910", "flights")),
        (2, "2 U1 reservations", ("U1", "reservations")),
        (2, "2 U1", ("U1",)),
        (3, "3F HTL1001", ("HTL1001",)),
        (4, "4F HTL1003", ("HTL1003",)),
        (5, '5F LIS "2021/01/01 00:00:00" "2022/12/31 23:59:59"',
         ("LIS", "2021/01/01 00:00:00", "2022/12/31 23:59:59")),
        (6, "6F 2021 10", ("2021", "10")),
        (7, "7F 20", ("20",)),
        (8, "8F HTL1001 2023/05/02 2023/05/02", ("HTL1001", "2023/05/02", "2023/05/02")),
        (9, "9F Julia", ("Julia",)),
        (9, "9 Julia Maria", ("Julia Maria",)),
        (10, "10F 2023 10", ("2023", "10")),
        (10, "10 2023", ("2023",)),
        (10, "10", ()),
    ],
)
def test_valid_inputs_return_arguments(query, text, expected):
    assert validate_input(query, text) == expected


def test_query_nine_without_prefix_is_accepted():
    assert validate_input(9, "9") == ()


def _argument(query, text):
    with pytest.raises(InvalidInputError) as info:
        validate_input(query, text)
    return info.value.argument


@pytest.mark.parametrize(
    "query, text",
    [
        (1, ""),
        (1, "1"),
        (1, "1 a b"),
        (1, "1  a"),
        (2, "2"),
        (2, "2 U1 flights extra"),
        (3, "3 a b"),
        (4, "4"),
        (6, "6 2021"),
        (6, "6 2021 10 5"),
        (7, "7 20 30"),
        (8, "8 HTL1001 2023/05/02"),
        (8, "8 HTL1001 2023/05/02 2023/05/03 x"),
        (10, "10 2023 1 x"),
    ],
)
def test_wrong_number_of_arguments(query, text):
    assert _argument(query, text) is None


@pytest.mark.parametrize(
    "query, text",
    [(1, "2 U1"), (3, "3X HTL1001"), (7, "7f 20"), (9, "99 Julia"), (10, "1 2023")],
)
def test_wrong_query_token(query, text):
    assert _argument(query, text) == 1


def test_query_two_bad_kind():
    assert _argument(2, "2 U1 hotels") == 3


def test_query_six_year_out_of_range():
    assert _argument(6, "6 1800 10") == 2
    assert _argument(6, "6 9999 10") == 2


def test_query_eight_bad_dates():
    assert _argument(8, "8 H 2023/13/01 2023/05/02") == 3
    assert _argument(8, "8 H 2023/05/01 bad") == 4


def test_query_ten_bad_year_and_month():
    assert _argument(10, "10 1800") == 2
    assert _argument(10, "10 2023 13") == 3
    assert _argument(10, "10 2023 0") == 3


def test_query_five_bad_arguments():
    end = '"2022/12/31 23:59:59"'
    assert _argument(5, f'5 LI1 "2021/01/01 00:00:00" {end}') == 2
    assert _argument(5, f'5 LIS "bad" {end}') == 3
    assert _argument(5, '5 LIS "2021/01/01 00:00:00" "2022/12/31 25:00:00"') == 4
    assert _argument(5, "5") == 2


def test_query_five_argument_errors_override_query_token():
    dates = '"2021/01/01 00:00:00" "2022/12/31 23:59:59"'
    assert _argument(5, f"6 LIS {dates}") == 1
    assert _argument(5, f"6 L1S {dates}") == 2


def test_query_five_airport_longer_than_three_characters():
    assert _argument(5, '5 LISB "2021/01/01 00:00:00" "2022/12/31 23:59:59"') == 3


def test_unknown_query_is_not_checked():
    assert validate_input(11, "anything at all") == ()


def test_error_is_a_value_error_with_message():
    with pytest.raises(ValueError, match="argument 2 is invalid"):
        validate_input(6, "6 1800 10")
    with pytest.raises(ValueError, match="number of arguments"):
        validate_input(1, "1")