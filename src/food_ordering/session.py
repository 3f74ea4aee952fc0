"""
Ordering session — drives one customer through the console dialogue.

    menu code → add-on prompts → quantity → payment code → receipt → workflow

Bad input (an unknown menu or payment code, an unusable quantity) raises an
`OrderingError` where it is read. The error is caught once, in `run()`,
shown to the user, and ends the session: no retry, no Order, no payment.
"""

import logging
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, ValidationError

from food_ordering.console import OrderingIO
from food_ordering.domain.errors import InvalidQuantity, InvalidSelection, OrderingError
from food_ordering.domain.models import (
    QUANTITY_ADAPTER,
    MenuItem,
    Order,
    OrderItem,
    OrderResult,
    PaymentChoice,
    Receipt,
)
from food_ordering.domain.pricing import MenuCatalog, decorate
from food_ordering.services.factory import PaymentFactory
from food_ordering.services.notify import NotificationService
from food_ordering.workflows import OrderWorkflow

logger = logging.getLogger(__name__)

YES = "yes"


class SessionOutcome(BaseModel):
    """What a session produced.

    On the error paths `order` and `result` stay None; `item` is set when
    the menu selection itself succeeded.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    item: OrderItem | None = None
    order: Order | None = None
    result: OrderResult | None = None
    error: OrderingError | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None


def parse_code(text: str, field: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidSelection(field, text.strip()) from None


class OrderSession:
    """One pass through the ordering dialogue over an `OrderingIO`."""

    def __init__(self, io: OrderingIO) -> None:
        self.io = io

    def _select_item(self) -> MenuItem:
        self.io.show("Welcome to the Online Food Ordering System")
        self.io.show("Select your meal:")
        for choice, item in MenuCatalog.ITEMS.items():
            self.io.show(f"\t{choice.value} - {item.name}")
        code = parse_code(self.io.ask("Enter your option: "), "menu")
        return MenuCatalog.select_item(code)

    def _customize(self, item: MenuItem) -> OrderItem:
        customized: OrderItem = item
        for add_on in MenuCatalog.ADD_ONS.values():
            answer = self.io.ask(f"Add {add_on.name}? (yes/no): ")
            if answer.strip().lower() == YES:
                customized = decorate(customized, add_on)
        return customized

    def _ask_quantity(self) -> Decimal:
        text = self.io.ask("Enter quantity: ").strip()
        try:
            return QUANTITY_ADAPTER.validate_python(text)
        except ValidationError:
            raise InvalidQuantity(text) from None

    def _select_payment(self) -> PaymentChoice:
        self.io.show("Choose Payment Method:")
        for choice, method in PaymentFactory.METHODS.items():
            self.io.show(f"\t{choice.value} - {method.label}")
        code = parse_code(self.io.ask("Enter option: "), "payment")
        return PaymentFactory.choice(code)

    def run(self) -> SessionOutcome:
        item: OrderItem | None = None
        try:
            item = self._select_item()
            item = self._customize(item)
            quantity = self._ask_quantity()
            payment = self._select_payment()
        except OrderingError as exc:
            logger.warning("Session ended: %s", exc)
            self.io.show(f"{exc}. Exiting.")
            return SessionOutcome(item=item, error=exc)

        order = Order(item=item, payment=payment, quantity=quantity)
        payment_method = PaymentFactory.get_payment_method(order.payment)

        self.io.show("")
        for line in Receipt.for_order(order, payment_method.label).lines():
            self.io.show(line)

        workflow = OrderWorkflow(order, payment_method, NotificationService(self.io.show))
        result = workflow.run()
        return SessionOutcome(item=item, order=order, result=result)
