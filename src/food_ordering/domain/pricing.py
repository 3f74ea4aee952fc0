"""
Menu catalog and add-on composition (Decorator pattern, flattened).

Anything that has a description, a unit cost and a quantity-scaled total
satisfies `PricedItem` — both plain `MenuItem`s and `DecoratedItem`s do.
`decorate()` wraps an item with one more add-on and returns a new item;
stacking is unbounded and the wrapped item is never modified.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from food_ordering.domain.errors import InvalidSelection
from food_ordering.domain.models import AddOn, DecoratedItem, MenuChoice, MenuItem, OrderItem


@runtime_checkable
class PricedItem(Protocol):
    """Interface for anything that can be put on an order.

    Structural subtyping — MenuItem and DecoratedItem satisfy it without
    inheriting from it.
    """

    @property
    def description(self) -> str: ...

    @property
    def unit_cost(self) -> Decimal: ...

    def total_price(self, quantity: Decimal | int | float | str) -> Decimal: ...


class MenuCatalog:
    """Fixed menu: base items by console code, add-ons by prompt key.

    Examples:
        - Pizza:                         4.25
        - Burger + Extra Cheese:        11.00
        - Pizza + Extra Cheese + Sauce:  5.75
    """

    ITEMS: dict[MenuChoice, MenuItem] = {
        MenuChoice.PIZZA: MenuItem(name="Pizza", cost=Decimal("4.25")),
        MenuChoice.BURGER: MenuItem(name="Burger", cost=Decimal("10.00")),
        MenuChoice.SALAD: MenuItem(name="Salad", cost=Decimal("5.00")),
    }
    # Insertion order is the order the session offers them in
    ADD_ONS: dict[str, AddOn] = {
        "cheese": AddOn(name="Extra Cheese", surcharge=Decimal("1.00")),
        "sauce": AddOn(name="Sauce", surcharge=Decimal("0.50")),
    }

    @classmethod
    def select_item(cls, code: int) -> MenuItem:
        try:
            return cls.ITEMS[MenuChoice(code)]
        except ValueError:
            raise InvalidSelection("menu", code) from None

    @classmethod
    def add_on(cls, key: str) -> AddOn:
        try:
            return cls.ADD_ONS[key.strip().lower()]
        except KeyError:
            raise InvalidSelection("add-on", key) from None


def decorate(item: OrderItem, add_on: AddOn) -> DecoratedItem:
    if isinstance(item, DecoratedItem):
        return item.with_add_on(add_on)
    return DecoratedItem(base=item, add_ons=(add_on,))
