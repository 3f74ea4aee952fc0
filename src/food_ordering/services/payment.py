"""
Payment method facades (Strategy pattern).

Part of the **service layer** that keeps side effects behind small
interfaces. In a real system these would call a card processor or the
PayPal API. Here a payment is simulated: it is logged and a
`PaymentConfirmation` record is returned for the workflow to show.

The workflow only depends on the `PaymentMethod` protocol, so a new method
is a new class plus one entry in `PaymentFactory`.
"""

import logging
from decimal import Decimal
from typing import Protocol

from food_ordering.domain.models import PaymentConfirmation, as_decimal, format_money

logger = logging.getLogger(__name__)


class PaymentMethod(Protocol):
    """Interface for charging an order total."""

    label: str

    def pay(self, amount: Decimal) -> PaymentConfirmation: ...


class _SimulatedPayment:
    """Shared behaviour: log, then hand back a confirmation record.

    Always succeeds in this simulator. A negative amount fails validation
    of the confirmation record and raises `pydantic.ValidationError`.
    """

    label: str = ""

    def pay(self, amount: Decimal) -> PaymentConfirmation:
        confirmation = PaymentConfirmation(method=self.label, amount=as_decimal(amount))
        logger.info("Charging %s via %s", format_money(confirmation.amount), self.label)
        return confirmation


class CreditCardPayment(_SimulatedPayment):
    label = "Credit Card"


class PayPalPayment(_SimulatedPayment):
    label = "PayPal"
