# services/command_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Iterable

from models.ingredient import IngredientPool
from models.pizza import Pizza, PizzaBuilder, PricedPizza

logger = logging.getLogger("pizzashop.commands")


class OrderCommand(ABC):
    # An order command turns the pizza picked on the form into a priced
    # snapshot ready to go into the cart.

    @abstractmethod
    def execute(self, base_pizza: Pizza, selected_extras: Iterable[str] = ()) -> PricedPizza:
        pass

    @staticmethod
    def _price(pizza: Pizza) -> PricedPizza:
        priced = PricedPizza(
            pizza=pizza,
            unit_price=pizza.total_price,
            summary=pizza.describe(),
        )
        logger.info(priced.summary.replace("\n", ""))
        return priced


class DefaultPizzaCommand(OrderCommand):
    # Plain pizza: base toppings only, extras are ignored.

    def execute(self, base_pizza, selected_extras=()):
        pizza = (
            PizzaBuilder()
            .set_type(base_pizza.type)
            .set_size(base_pizza.size)
            .set_base_price(base_pizza.base_price)
            .add_all_toppings(base_pizza.toppings)
            .build()
        )
        return self._price(pizza)


class CustomizePizzaCommand(OrderCommand):
    """
    Customized pizza: base toppings plus the extras the customer ticked.

    Type and size may differ from the base pizza; when they are None the
    base pizza's values are kept. Extra names go through the ingredient
    pool and a topping already on the pizza is not added a second time.
    """

    def __init__(self, pool: IngredientPool, pizza_type: str | None = None, size=None):
        self.pool = pool
        self.pizza_type = pizza_type
        self.size = size

    def execute(self, base_pizza, selected_extras=()):
        toppings: list[str] = []
        for name in list(base_pizza.toppings) + list(selected_extras):
            topping = self.pool.intern(name).name
            if topping not in toppings:
                toppings.append(topping)

        pizza = (
            PizzaBuilder()
            .set_type(self.pizza_type if self.pizza_type is not None else base_pizza.type)
            .set_size(self.size if self.size is not None else base_pizza.size)
            .set_base_price(base_pizza.base_price)
            .add_all_toppings(toppings)
            .build()
        )
        return self._price(pizza)
