"""
mediator_service.py

Customer and order manager never hold a reference to each other; the
OrderMediator sits in between and forwards the order.

Flow for one submitted order:
    Customer.send_order()
        -> OrderMediator.find_order()
            -> OrderManager.request_confirmation()
                -> yes: OrderPipeline runs from "Order Confirmed"
                -> no : cancellation message
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional

from models.order import OrderStatus, StepLabel
from services.notifier import Notifier
from services.pipeline_service import OrderPipeline

logger = logging.getLogger("pizzashop.mediator")


class OrderOutcome(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ABORTED = "aborted"
    EMPTY = "empty"


class OrderManager:
    def __init__(
        self,
        notifier: Notifier,
        order_summary: str,
        pipeline_factory: Callable[[Notifier], OrderPipeline] = OrderPipeline.standard,
    ):
        self.notifier = notifier
        self.order_summary = order_summary
        self.pipeline_factory = pipeline_factory
        self.mediator: Optional["OrderMediator"] = None

    def request_confirmation(self) -> OrderOutcome:
        question = "Order Manager : Can you confirm this Pizza Order?\n\n" + self.order_summary
        if not self.notifier.confirm(question):
            logger.info("order manager: order declined")
            self.notifier.inform("OK !  Add a new Pizza Order.")
            return OrderOutcome.CANCELLED

        # fresh chain for every confirmed order
        status = OrderStatus(StepLabel.CONFIRMED.value)
        pipeline = self.pipeline_factory(self.notifier)
        logger.info("order manager: order confirmed, starting pipeline")
        if pipeline.run(status):
            return OrderOutcome.COMPLETED
        return OrderOutcome.ABORTED


class Customer:
    def __init__(self, username: str, notifier: Notifier):
        self.username = username
        self.notifier = notifier
        self.mediator: Optional["OrderMediator"] = None

    def send_order(self) -> OrderOutcome:
        if self.mediator is None:
            raise RuntimeError("Customer is not connected to an order mediator")
        self.notifier.notify(f"{self.username} : Sending the Pizza Order...")
        logger.info(f"customer {self.username}: sending order")
        return self.mediator.find_order()


class OrderMediator:
    def __init__(self, order_manager: OrderManager, customer: Customer,
                 notifier: Notifier, shop_name: str = "Syzygy"):
        self.order_manager = order_manager
        self.customer = customer
        self.notifier = notifier
        self.shop_name = shop_name
        # both actors talk through this mediator only
        order_manager.mediator = self
        customer.mediator = self

    def find_order(self) -> OrderOutcome:
        self.notifier.notify(f"{self.shop_name} App : Finding and Forwarding the Pizza Order...")
        return self.order_manager.request_confirmation()
