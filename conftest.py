import pytest

from data.repository import DEFAULT_MENU
from services.notifier import Notifier
from services.order_service import OrderService


class RecordingNotifier(Notifier):
    # Stands in for the dialogs; remembers every message in order.

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages: list[tuple[str, str]] = []

    def notify(self, message):
        self.messages.append(("notify", message))

    def inform(self, message):
        self.messages.append(("inform", message))

    def warn(self, message):
        self.messages.append(("warn", message))

    def confirm(self, message):
        self.messages.append(("confirm", message))
        return self.answer

    def of_kind(self, kind):
        return [m for k, m in self.messages if k == kind]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def service(notifier):
    svc = OrderService(dict(DEFAULT_MENU), notifier)
    svc.login("Dilan")
    return svc
