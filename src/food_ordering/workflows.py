"""
Order workflow — OrderWorkflow.

Runs a finalized `Order` through a fixed, non-branching sequence of stages:

    SELECT_ITEM → CUSTOMIZE_MEAL → PAY → CONFIRM_ORDER

The stages are listed explicitly and driven in order by `run()`. There are
no decision points: customization already happened when the item was
decorated, so CUSTOMIZE_MEAL only acknowledges it. A workflow instance runs
exactly once.
"""

import logging
from decimal import Decimal
from typing import Callable

from food_ordering.domain.errors import WorkflowError
from food_ordering.domain.models import (
    Order,
    OrderResult,
    OrderStage,
    OrderState,
    PaymentConfirmation,
    format_money,
)
from food_ordering.services.factory import PaymentFactory
from food_ordering.services.notify import NotificationService
from food_ordering.services.payment import PaymentMethod

logger = logging.getLogger(__name__)


class OrderWorkflow:
    """Orchestrates the lifecycle of one order.

    Execution flow:
        1. Select item     → announce the (decorated) item
        2. Customize meal  → acknowledge the add-ons
        3. Pay             → PaymentMethod.pay(total), exactly once
        4. Confirm order   → recompute and announce the total paid

    `get_status()` inspects progress without affecting it.
    """

    def __init__(
        self,
        order: Order,
        payment_method: PaymentMethod | None = None,
        notifier: NotificationService | None = None,
    ) -> None:
        self.order = order
        self.payment_method = payment_method or PaymentFactory.get_payment_method(order.payment)
        self.notifier = notifier or NotificationService()
        self.state = OrderState()
        self.confirmation: PaymentConfirmation | None = None
        self._started = False
        self._stages: list[tuple[OrderStage, Callable[[], None]]] = [
            (OrderStage.SELECT_ITEM, self._select_item),
            (OrderStage.CUSTOMIZE_MEAL, self._customize_meal),
            (OrderStage.PAY, self._pay),
            (OrderStage.CONFIRM_ORDER, self._confirm_order),
        ]

    def get_status(self) -> dict:
        return {
            "item_selected": self.state.item_selected,
            "customized": self.state.customized,
            "paid": self.state.paid,
            "confirmed": self.state.confirmed,
            "description": self.order.item.description,
            "payment_method": self.payment_method.label,
        }

    # ── Stages ───────────────────────────────────────────────────

    def _total(self) -> Decimal:
        return self.order.total

    def _select_item(self) -> None:
        self.notifier.send(f"Item selected: {self.order.item.description}")
        self.state.item_selected = True

    def _customize_meal(self) -> None:
        self.notifier.send("Final customizations applied.")
        self.state.customized = True

    def _pay(self) -> None:
        total = self._total()
        self.notifier.send("Processing payment...")
        self.confirmation = self.payment_method.pay(total)
        self.notifier.send(self.confirmation.message)
        self.state.paid = True

    def _confirm_order(self) -> None:
        self.notifier.send(f"Order confirmed. Total paid: {format_money(self._total())}")
        self.notifier.send("Thank you!")
        self.state.confirmed = True

    # ── Run ──────────────────────────────────────────────────────

    def run(self) -> OrderResult:
        if self._started:
            raise WorkflowError("order workflow has already run")
        self._started = True

        logger.info(
            "Starting order — %s x %s via %s",
            self.order.quantity,
            self.order.item.description,
            self.payment_method.label,
        )
        for stage, step in self._stages:
            logger.debug("Stage %s", stage.value)
            step()

        if self.confirmation is None:
            raise WorkflowError("order workflow finished without a payment confirmation")
        logger.info("Order completed — %s", format_money(self.confirmation.amount))
        return OrderResult(
            description=self.order.item.description,
            quantity=self.order.quantity,
            total=self._total(),
            payment=self.confirmation,
            stages=tuple(stage for stage, _ in self._stages),
        )
