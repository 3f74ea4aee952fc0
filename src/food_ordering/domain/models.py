"""
Domain models for the food ordering session.

All models use Pydantic v2 BaseModel for validation. Priced values are
frozen: reading a description or a cost never mutates anything, and an
add-on produces a new item instead of changing the one it wraps.

Money and quantities are `Decimal` so that surcharges add up exactly and
in any order (4.25 + 1.00 + 0.50 == 4.25 + 0.50 + 1.00).

Enums inherit from (int, Enum) so the menu and payment codes typed at the
console map straight onto them.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

CENTS = Decimal("0.01")
MAX_QUANTITY = Decimal("1000")

# Positive, finite, bounded decimal. Used for order quantities and for
# parsing the raw quantity text typed at the console.
Quantity = Annotated[
    Decimal,
    Field(gt=0, le=MAX_QUANTITY, decimal_places=4, allow_inf_nan=False),
]
QUANTITY_ADAPTER: TypeAdapter[Decimal] = TypeAdapter(Quantity)


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a number to Decimal, going through str() so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"${round_money(amount)}"


def format_quantity(quantity: Decimal) -> str:
    # 2 -> "2", 2.50 -> "2.5", 100 -> "100" (normalize alone would give 1E+2)
    return f"{quantity.normalize():f}"


class MenuChoice(int, Enum):
    """Menu codes offered at the console — mapped to items in pricing.py."""

    PIZZA = 1
    BURGER = 2
    SALAD = 3


class PaymentChoice(int, Enum):
    """Payment codes offered at the console — mapped to methods in services/factory.py."""

    CREDIT_CARD = 1
    PAYPAL = 2


class OrderStage(str, Enum):
    """The fixed stages of the order workflow, in execution order."""

    SELECT_ITEM = "SELECT_ITEM"
    CUSTOMIZE_MEAL = "CUSTOMIZE_MEAL"
    PAY = "PAY"
    CONFIRM_ORDER = "CONFIRM_ORDER"


# ── Priced items ─────────────────────────────────────────────────────


class MenuItem(BaseModel):
    """A base menu item with a fixed catalog price."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    cost: Decimal = Field(..., ge=0)

    @property
    def description(self) -> str:
        return self.name

    @property
    def unit_cost(self) -> Decimal:
        return self.cost

    def total_price(self, quantity: Decimal | int | float | str) -> Decimal:
        return as_decimal(quantity) * self.unit_cost


class AddOn(BaseModel):
    """A modifier that adds a surcharge and a description suffix."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    surcharge: Decimal = Field(..., ge=0)

    @property
    def suffix(self) -> str:
        return f" + {self.name}"


class DecoratedItem(BaseModel):
    """A menu item wrapped by one or more add-ons.

    The wrapping chain is kept flat: `add_ons` lists the modifiers in the
    order they were applied, innermost first. No absolute price is stored;
    `unit_cost` is recomputed from the base item and the surcharges on
    every call.
    """

    model_config = ConfigDict(frozen=True)

    base: MenuItem
    add_ons: tuple[AddOn, ...] = ()

    @property
    def description(self) -> str:
        return self.base.description + "".join(add_on.suffix for add_on in self.add_ons)

    @property
    def unit_cost(self) -> Decimal:
        return self.base.unit_cost + sum((add_on.surcharge for add_on in self.add_ons), Decimal("0"))

    def total_price(self, quantity: Decimal | int | float | str) -> Decimal:
        return as_decimal(quantity) * self.unit_cost

    def with_add_on(self, add_on: AddOn) -> "DecoratedItem":
        return DecoratedItem(base=self.base, add_ons=(*self.add_ons, add_on))


# Concrete item types an Order can hold; both satisfy pricing.PricedItem.
OrderItem = MenuItem | DecoratedItem


# ── Order ────────────────────────────────────────────────────────────


class Order(BaseModel):
    """Every selection the customer made, finalized.

    Created only after the item, add-ons, quantity and payment method are all
    known. Consumed by `OrderWorkflow` and discarded afterwards.
    """

    model_config = ConfigDict(frozen=True)

    item: OrderItem
    payment: PaymentChoice
    quantity: Quantity

    @property
    def total(self) -> Decimal:
        """Amount to charge, rounded half-up to cents."""
        return round_money(self.item.total_price(self.quantity))


class OrderState(BaseModel):
    """Mutable state tracked while the workflow runs.

    Updated after each stage completes. Exposed via
    `OrderWorkflow.get_status()`.
    """

    item_selected: bool = False  # True after SELECT_ITEM
    customized: bool = False     # True after CUSTOMIZE_MEAL
    paid: bool = False           # True after PAY
    confirmed: bool = False      # True after CONFIRM_ORDER


# ── Payment / results ────────────────────────────────────────────────


class PaymentConfirmation(BaseModel):
    """Record emitted by a payment method once it has charged an amount."""

    model_config = ConfigDict(frozen=True)

    method: str
    amount: Decimal = Field(..., ge=0)  # Must be non-negative

    @field_validator("amount")
    @classmethod
    def round_to_cents(cls, amount: Decimal) -> Decimal:
        return round_money(amount)

    @property
    def message(self) -> str:
        return f"Paid {format_money(self.amount)} using {self.method}."


class OrderResult(BaseModel):
    """Final result returned by the workflow."""

    model_config = ConfigDict(frozen=True)

    description: str
    quantity: Decimal
    total: Decimal
    payment: PaymentConfirmation
    stages: tuple[OrderStage, ...]


class Receipt(BaseModel):
    """The receipt printed before the workflow runs."""

    model_config = ConfigDict(frozen=True)

    description: str
    quantity: Decimal
    unit_price: Decimal
    total: Decimal
    payment_method: str

    @classmethod
    def for_order(cls, order: Order, payment_method: str) -> "Receipt":
        return cls(
            description=order.item.description,
            quantity=order.quantity,
            unit_price=order.item.unit_cost,
            total=order.total,
            payment_method=payment_method,
        )

    def lines(self) -> list[str]:
        return [
            "------ RECEIPT ------",
            f"Item: {self.description}",
            f"Quantity: {format_quantity(self.quantity)}",
            f"Unit Price: {format_money(self.unit_price)}",
            f"Total Price: {format_money(self.total)}",
            f"Payment Method: {self.payment_method}",
        ]
