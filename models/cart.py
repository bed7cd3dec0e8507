from dataclasses import dataclass
# Cart model: the pending order list shown in the shop window.

MAX_QUANTITY = 10


@dataclass(frozen=True)
class CartRow:
    type: str | None
    size: str
    toppings: tuple[str, ...]
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)


class Cart:
    def __init__(self, max_quantity: int = MAX_QUANTITY):
        self.rows: list[CartRow] = []
        self.max_quantity = max_quantity

    def add(self, row: CartRow) -> None:
        if not 1 <= row.quantity <= self.max_quantity:
            raise ValueError(
                f"The quantity must be between 1 and {self.max_quantity}."
            )
        self.rows.append(row)

    def remove(self, index: int) -> CartRow:
        if not 0 <= index < len(self.rows):
            raise IndexError(f"No pizza order at row {index}")
        return self.rows.pop(index)

    def total(self) -> float:
        return round(sum(r.line_total for r in self.rows), 2)

    def clear(self):
        self.rows.clear()

    def __len__(self) -> int:
        return len(self.rows)
