from dataclasses import dataclass
from enum import Enum
# Pizza model plus the builder used to assemble it.

TOPPING_PRICE = 50.0  # flat fee per topping, in Rs


class Size(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


def parse_size(size) -> Size | None:
    # None or "" -> None; text that is not a size raises ValueError
    if not size:
        return None
    return Size(size)


@dataclass(frozen=True)
class Pizza:
    type: str | None
    size: Size | None
    base_price: float
    toppings: tuple[str, ...] = ()

    @property
    def total_price(self) -> float:
        # Price of one pizza: base price + flat fee for every topping.
        return round(self.base_price + len(self.toppings) * TOPPING_PRICE, 2)

    def describe(self) -> str:
        size = self.size.value if self.size else ""
        return (
            f"Pizza: {self.type or ''}, \nSize: {size}, \nToppings: "
            f"{', '.join(self.toppings)} \nPrice of One : Rs {self.total_price}"
        )


@dataclass(frozen=True)
class PricedPizza:
    # Snapshot handed back by an order command.
    pizza: Pizza
    unit_price: float
    summary: str


class PizzaBuilder:
    """
    Fluent builder for Pizza.

    Nothing is validated here: a field that is never set stays None
    (or 0.0 for the base price). Every build() returns a fresh Pizza
    whose toppings tuple shares nothing with the builder.
    """

    def __init__(self):
        self.type: str | None = None
        self.size: Size | None = None
        self.base_price: float = 0.0
        self.toppings: list[str] = []

    def set_type(self, pizza_type: str) -> "PizzaBuilder":
        self.type = pizza_type
        return self

    def set_size(self, size) -> "PizzaBuilder":
        # accepts a Size or its display text ("Medium"); blank means unset
        self.size = parse_size(size)
        return self

    def set_base_price(self, base_price: float | None) -> "PizzaBuilder":
        self.base_price = float(base_price) if base_price is not None else 0.0
        return self

    def add_topping(self, topping: str) -> "PizzaBuilder":
        self.toppings.append(topping)
        return self

    def add_all_toppings(self, toppings) -> "PizzaBuilder":
        self.toppings.extend(toppings)
        return self

    def build(self) -> Pizza:
        return Pizza(
            type=self.type,
            size=self.size,
            base_price=self.base_price,
            toppings=tuple(self.toppings),
        )
