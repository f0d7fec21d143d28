"""Solutions to the structs, enums and options exercises."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MAX = 255
_MIN_WEIGHT = 10


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order that others are built from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; it must weigh at least ten grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


def _check_u8(value: int, what: str) -> int:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{what} {value} is out of range 0..={_U8_MAX}")
    return value


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, "x")
        _check_u8(self.y, "y")


@dataclass(frozen=True)
class ChangeColor:
    """Message: change the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Message: store a text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (
                    _check_u8(red, "red"),
                    _check_u8(green, "green"),
                    _check_u8(blue, "blue"),
                )
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message {message!r}")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at the given hour: 5 before 22, 0 until 23, None past that."""
    if time_of_day < 0:
        raise ValueError(f"time of day must not be negative, got {time_of_day}")
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0