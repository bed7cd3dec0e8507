# services/notifier.py
from abc import ABC, abstractmethod


class Notifier(ABC):
    # Presentation surface the order services talk to.
    # The GUI implements it with tkinter dialogs.

    @abstractmethod
    def notify(self, message: str) -> None:
        # short-lived notification, dismissed automatically
        pass

    @abstractmethod
    def inform(self, message: str) -> None:
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        pass

    @abstractmethod
    def confirm(self, message: str) -> bool:
        # yes/no question; True means yes
        pass
