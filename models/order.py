from dataclasses import dataclass, field
from enum import Enum

from models.cart import Cart
from models.ingredient import IngredientPool
# Order status token and the per-user session it lives in.


class StepLabel(str, Enum):
    # Labels written to the status token, in pipeline order.
    CONFIRMED = "Order Confirmed"
    ACCEPTED = "Order Accepted"
    COOKED = "Finished cooking"
    PACKED = "Finished packing"


@dataclass
class OrderStatus:
    label: str | None = None


@dataclass
class OrderSession:
    username: str
    cart: Cart = field(default_factory=Cart)
    pool: IngredientPool = field(default_factory=IngredientPool)
    order_summary: str = ""
    order_total: float = 0.0
