from models.ingredient import IngredientPool
from models.pizza import Pizza, Size
from services.command_service import CustomizePizzaCommand, DefaultPizzaCommand

BASE = Pizza("Chicken Pizza", Size.MEDIUM, 1050.0, ("Cheese", "Chicken", "Tomato Sauce"))


def test_default_command_ignores_extras():
    priced = DefaultPizzaCommand().execute(BASE, ["Mushrooms"])
    assert priced.pizza == BASE
    assert priced.pizza is not BASE
    assert priced.unit_price == 1200.0
    assert "Price of One : Rs 1200.0" in priced.summary


def test_customize_command_appends_extras():
    pool = IngredientPool()
    priced = CustomizePizzaCommand(pool).execute(BASE, ["Mushrooms", "Onions"])
    assert priced.pizza.toppings == ("Cheese", "Chicken", "Tomato Sauce", "Mushrooms", "Onions")
    assert priced.unit_price == 1050.0 + 5 * 50
    assert "Mushrooms" in pool


def test_customize_command_drops_duplicate_toppings():
    priced = CustomizePizzaCommand(IngredientPool()).execute(BASE, ["Cheese", "Onions", "Onions"])
    assert priced.pizza.toppings == ("Cheese", "Chicken", "Tomato Sauce", "Onions")


def test_customize_command_can_change_type_and_size():
    priced = CustomizePizzaCommand(IngredientPool(), "Veggie Pizza", "Large").execute(BASE)
    assert priced.pizza.type == "Veggie Pizza"
    assert priced.pizza.size is Size.LARGE
    assert priced.pizza.base_price == 1050.0
