import pytest

from rustlings.solutions.basics import (
    animal_habitat,
    bigger,
    calculate_price_of_apples,
    foo_if_fizz,
    is_even,
    sale_price,
    square,
)


@pytest.mark.parametrize(
    ("quantity", "price"), [(35, 70), (40, 80), (41, 41), (65, 65)]
)
def test_calculate_price_of_apples(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_gopher_lives_in_burrow():
    assert animal_habitat("gopher") == "Burrow"


def test_snake_lives_in_desert():
    assert animal_habitat("snake") == "Desert"


def test_crab_lives_on_beach():
    assert animal_habitat("crab") == "Beach"


def test_unknown_animal():
    assert animal_habitat("dinosaur") == "Unknown"


def test_sale_price_of_odd_price():
    assert sale_price(51) == 48


def test_sale_price_of_even_price():
    assert sale_price(50) == 40


def test_is_even():
    assert is_even(4) is True
    assert is_even(5) is False


def test_square():
    assert square(3) == 9