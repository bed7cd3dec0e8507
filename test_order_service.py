from data.repository import DEFAULT_MENU
from conftest import RecordingNotifier
from services.mediator_service import OrderOutcome
from services.order_service import OrderService

EXPECTED_ROW = (
    "Pizza: Chicken Pizza, \n"
    "Size: Medium, \n"
    "Toppings: Cheese, Chicken, Tomato Sauce \n"
    "Quantity: 2, \n"
    "Total Price : Rs 2400.0"
)


def test_login_requires_username():
    notifier = RecordingNotifier()
    svc = OrderService(dict(DEFAULT_MENU), notifier)
    assert svc.login("   ") is None
    assert svc.session is None
    assert notifier.of_kind("warn") == ["Please enter Your Username"]

    session = svc.login(" Dilan ")
    assert session.username == "Dilan"
    assert session.cart.max_quantity == 10


def test_default_pizza_row_and_summary(service):
    row = service.add_pizza("Chicken Pizza", "Medium", 2)

    assert row.toppings == ("Cheese", "Chicken", "Tomato Sauce")
    assert row.unit_price == 1200.0
    assert row.line_total == 2400.0

    text, total = service.summary()
    assert total == 2400.0
    assert text == EXPECTED_ROW + "\n\n\nTotal Price of the Full Order : Rs 2400.0"


def test_customized_pizza_adds_extras(service):
    row = service.add_pizza("Veggie Pizza", "Large", 1, customize=True,
                            extras=["Mushrooms", "Extra Cheese"])
    assert row.toppings == ("Cheese", "Vegetable", "Tomato Sauce", "Mushrooms", "Extra Cheese")
    assert row.unit_price == 1300.0
    assert row.size == "Large"


def test_extras_ignored_without_customize(service):
    row = service.add_pizza("Margherita Pizza", "Small", 1, extras=["Mushrooms"])
    assert row.toppings == ("Cheese", "Margherita", "Tomato Sauce")


def test_bad_quantity_warns_and_adds_nothing(service, notifier):
    assert service.add_pizza("Chicken Pizza", "Medium", 11) is None
    assert len(service.session.cart) == 0
    assert len(notifier.of_kind("warn")) == 1


def test_remove_row(service, notifier):
    for name in ["Chicken Pizza", "Veggie Pizza", "Pepperoni Pizza"]:
        service.add_pizza(name, "Medium", 1)

    assert service.remove_row(1) is True
    assert [r.type for r in service.session.cart.rows] == ["Chicken Pizza", "Pepperoni Pizza"]

    assert service.remove_row(7) is False
    assert notifier.of_kind("warn") == ["Please select a Pizza"]


def test_submit_empty_cart_skips_mediator(service, notifier):
    assert service.submit() is OrderOutcome.EMPTY
    assert notifier.of_kind("warn") == ["Please add your order to the Order List"]
    assert notifier.of_kind("notify") == []
    assert notifier.of_kind("confirm") == []


def test_submit_runs_whole_order_and_clears_cart(service, notifier):
    service.add_pizza("Chicken Pizza", "Medium", 2)
    service.add_pizza("Pepperoni Pizza", "Large", 1)

    assert service.submit() is OrderOutcome.COMPLETED

    assert service.session.order_total == 3600.0
    assert service.session.order_summary.endswith("Total Price of the Full Order : Rs 3600.0")
    assert notifier.of_kind("confirm")[0].endswith(service.session.order_summary)
    assert notifier.of_kind("notify")[0] == "Dilan : Sending the Pizza Order..."
    assert len(service.session.cart) == 0


def test_declined_submit_still_clears_cart(service, notifier):
    notifier.answer = False
    service.add_pizza("Chicken Pizza", "Medium", 1)
    assert service.submit() is OrderOutcome.CANCELLED
    assert len(service.session.cart) == 0


def test_blank_size_still_adds_row(service, notifier):
    row = service.add_pizza("Chicken Pizza", "", 1)

    assert row.size == ""
    assert row.unit_price == 1200.0
    assert notifier.of_kind("warn") == []
    text, _ = service.summary()
    assert text.startswith("Pizza: Chicken Pizza, \nSize: , \n")


def test_unknown_size_warns_and_adds_nothing(service, notifier):
    assert service.add_pizza("Chicken Pizza", "Huge", 1) is None
    assert len(service.session.cart) == 0
    assert notifier.of_kind("warn") == ["Unknown pizza size: Huge"]
