# services/pipeline_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import List

from models.order import OrderStatus, StepLabel
from services.notifier import Notifier

logger = logging.getLogger("pizzashop.pipeline")

ORDER_ERROR = "Order Error..."
ORDER_SUCCESS = "Your Pizza Order is successful!\nGet it and Enjoy!"


class OrderStep(ABC):
    # One stage of the order pipeline.
    # A step only runs when the status token holds exactly the label
    # written by the stage before it.

    required_label: str = ""
    completed_label: str | None = None
    notice: str = ""

    def can_process(self, status: OrderStatus) -> bool:
        return status.label == self.required_label

    def process_step(self, status: OrderStatus, notifier: Notifier) -> bool:
        if not self.can_process(status):
            logger.warning(
                f"{type(self).__name__}: expected status {self.required_label!r}, "
                f"got {status.label!r}"
            )
            notifier.warn(ORDER_ERROR)
            return False

        notifier.notify(self.notice)
        self.complete(status)
        logger.info(f"{type(self).__name__}: status now {status.label!r}")
        return True

    @abstractmethod
    def complete(self, status: OrderStatus) -> None:
        pass


class AcceptingStep(OrderStep):
    required_label = StepLabel.CONFIRMED.value
    completed_label = StepLabel.ACCEPTED.value
    notice = "Your Pizza Order is accepted!"

    def complete(self, status):
        status.label = self.completed_label


class CookingStep(OrderStep):
    required_label = StepLabel.ACCEPTED.value
    completed_label = StepLabel.COOKED.value
    notice = "Your Pizza is being cooked."

    def complete(self, status):
        status.label = self.completed_label


class PackingStep(OrderStep):
    required_label = StepLabel.COOKED.value
    completed_label = StepLabel.PACKED.value
    notice = "Your Pizza is being packed."

    def complete(self, status):
        status.label = self.completed_label


class HandoverStep(OrderStep):
    # Last step: leaves the token at "Finished packing".
    required_label = StepLabel.PACKED.value
    notice = "Your Pizza Order is handed over to the driver for delivery."

    def complete(self, status):
        pass


class OrderPipeline:
    # Runs the registered steps in order and stops at the first step
    # whose precondition does not hold. Nothing is rolled back.

    def __init__(self, notifier: Notifier):
        self.notifier = notifier
        self.steps: List[OrderStep] = []

    def add_step(self, step: OrderStep) -> "OrderPipeline":
        self.steps.append(step)
        return self

    @classmethod
    def standard(cls, notifier: Notifier) -> "OrderPipeline":
        return (
            cls(notifier)
            .add_step(AcceptingStep())
            .add_step(CookingStep())
            .add_step(PackingStep())
            .add_step(HandoverStep())
        )

    def run(self, status: OrderStatus) -> bool:
        for step in self.steps:
            if not step.process_step(status, self.notifier):
                logger.warning(f"pipeline aborted at {type(step).__name__}")
                return False

        self.notifier.inform(ORDER_SUCCESS)
        logger.info("pipeline finished, order handed over")
        return True
