import pytest

from minishell.numbers import atoi, itoa


@pytest.mark.parametrize("value", [0, 1, -1, 42, -57, 2147483647, -2147483648])
def test_round_trip(value):
    assert atoi(itoa(value)) == value


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-42") == atoi("-42")
    assert atoi("   17") == atoi("17")


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == atoi("123")


def test_atoi_plus_sign_accepted():
    assert atoi("+99") == atoi("99")


def test_atoi_two_signs_give_zero():
    assert atoi("-+5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_negative_has_minus_prefix():
    text = itoa(-1234)
    assert text.startswith("-")
    assert text[1:] == itoa(1234)


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(12)