"""Solutions to the variables, functions and if exercises."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of the number."""
    return num * num