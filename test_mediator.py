import pytest

from conftest import RecordingNotifier
from services.mediator_service import Customer, OrderManager, OrderMediator, OrderOutcome
from services.pipeline_service import OrderPipeline


def wire(notifier, summary="Pizza: x"):
    manager = OrderManager(notifier, summary)
    customer = Customer("Dilan", notifier)
    mediator = OrderMediator(manager, customer, notifier)
    return manager, customer, mediator


def test_confirmed_order_runs_pipeline():
    notifier = RecordingNotifier(answer=True)
    manager, customer, mediator = wire(notifier)

    assert customer.send_order() is OrderOutcome.COMPLETED
    assert customer.mediator is mediator
    assert manager.mediator is mediator
    notices = notifier.of_kind("notify")
    assert notices[0] == "Dilan : Sending the Pizza Order..."
    assert notices[1] == "Syzygy App : Finding and Forwarding the Pizza Order..."
    assert len(notices) == 6
    assert notifier.of_kind("confirm") == [
        "Order Manager : Can you confirm this Pizza Order?\n\nPizza: x"
    ]


def test_declined_order_is_cancelled():
    notifier = RecordingNotifier(answer=False)
    _, customer, _ = wire(notifier)

    assert customer.send_order() is OrderOutcome.CANCELLED
    assert notifier.of_kind("inform") == ["OK !  Add a new Pizza Order."]
    assert len(notifier.of_kind("notify")) == 2


def test_manager_uses_fresh_pipeline_per_order():
    built = []

    def factory(n):
        pipeline = OrderPipeline.standard(n)
        built.append(pipeline)
        return pipeline

    notifier = RecordingNotifier()
    manager = OrderManager(notifier, "", pipeline_factory=factory)
    OrderMediator(manager, Customer("a", notifier), notifier)

    manager.request_confirmation()
    manager.request_confirmation()
    assert len(built) == 2
    assert built[0] is not built[1]


def test_unwired_customer_cannot_send():
    with pytest.raises(RuntimeError):
        Customer("a", RecordingNotifier()).send_order()
