# services/order_service.py

import logging
from typing import Iterable, Optional

from data.repository import base_toppings_for
from models.cart import CartRow
from models.order import OrderSession
from models.pizza import PizzaBuilder, parse_size
from services.command_service import CustomizePizzaCommand, DefaultPizzaCommand
from services.mediator_service import Customer, OrderManager, OrderMediator, OrderOutcome
from services.notifier import Notifier

logger = logging.getLogger("pizzashop.orders")


def format_row(row: CartRow) -> str:
    return (
        f"Pizza: {row.type or ''}, \nSize: {row.size}, \nToppings: "
        f"{', '.join(row.toppings)} \nQuantity: {row.quantity}, \n"
        f"Total Price : Rs {row.line_total}"
    )


def format_summary(rows: list[CartRow], total: float) -> str:
    # Rows are separated by a blank line; the full total closes the text.
    body = "".join(format_row(r) + "\n\n" for r in rows)
    return body + f"\nTotal Price of the Full Order : Rs {total}"


class OrderService:
    def __init__(self, menu: dict, notifier: Notifier):
        self.menu = menu
        self.notifier = notifier
        self.session: Optional[OrderSession] = None

    def login(self, username: str) -> Optional[OrderSession]:
        name = (username or "").strip()
        if not name:
            logger.warning("login rejected: empty username")
            self.notifier.warn("Please enter Your Username")
            return None

        self.session = OrderSession(username=name)
        self.session.cart.max_quantity = self.menu.get("max_quantity", self.session.cart.max_quantity)
        logger.info(f"session opened for {name}")
        return self.session

    def _require_session(self) -> OrderSession:
        if self.session is None:
            raise RuntimeError("No open session, call login() first")
        return self.session

    def add_pizza(
        self,
        pizza_type: str,
        size,
        quantity: int,
        customize: bool = False,
        extras: Iterable[str] = (),
    ) -> Optional[CartRow]:
        # Build the pizza shown on the form, price it through the
        # matching command and append it to the cart.
        session = self._require_session()

        # blank size stays unset; only unknown text is refused
        try:
            size = parse_size(size)
        except ValueError:
            logger.warning(f"add to cart rejected: unknown size {size!r}")
            self.notifier.warn(f"Unknown pizza size: {size}")
            return None

        base_pizza = (
            PizzaBuilder()
            .set_type(pizza_type)
            .set_size(size)
            .set_base_price(self.menu.get("base_price"))
            .add_all_toppings(base_toppings_for(self.menu, pizza_type))
            .build()
        )

        if customize:
            command = CustomizePizzaCommand(session.pool, pizza_type, size)
        else:
            command = DefaultPizzaCommand()
        priced = command.execute(base_pizza, list(extras))

        row = CartRow(
            type=priced.pizza.type,
            size=priced.pizza.size.value if priced.pizza.size else "",
            toppings=priced.pizza.toppings,
            quantity=quantity,
            unit_price=priced.unit_price,
        )
        try:
            session.cart.add(row)
        except ValueError as e:
            logger.warning(f"add to cart rejected: {e}")
            self.notifier.warn(str(e))
            return None

        logger.info(f"cart add {row.type} ({row.size}) x {row.quantity} @ Rs {row.unit_price}")
        return row

    def remove_row(self, index: int) -> bool:
        session = self._require_session()
        try:
            row = session.cart.remove(index)
        except IndexError as e:
            logger.warning(f"remove rejected: {e}")
            self.notifier.warn("Please select a Pizza")
            return False

        logger.info(f"cart remove row {index} ({row.type})")
        return True

    def summary(self) -> tuple[str, float]:
        session = self._require_session()
        total = session.cart.total()
        return format_summary(session.cart.rows, total), total

    def submit(self) -> OrderOutcome:
        session = self._require_session()
        if not session.cart.rows:
            logger.warning("submit rejected: cart is empty")
            self.notifier.warn("Please add your order to the Order List")
            return OrderOutcome.EMPTY

        session.order_summary, session.order_total = self.summary()

        # fresh actors per submitted order
        order_manager = OrderManager(self.notifier, session.order_summary)
        customer = Customer(session.username, self.notifier)
        OrderMediator(order_manager, customer, self.notifier,
                      shop_name=self.menu.get("shop_name", "Syzygy"))

        outcome = customer.send_order()
        logger.info(
            f"order from {session.username}: outcome={outcome.value}, "
            f"total={session.order_total}, rows={len(session.cart)}"
        )

        session.cart.clear()
        return outcome
