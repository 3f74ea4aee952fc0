"""
Pytest configuration and fixtures for food_ordering tests
"""

from decimal import Decimal

import pytest

from food_ordering.console import ScriptedIO
from food_ordering.domain.models import AddOn, MenuChoice, MenuItem, PaymentConfirmation, as_decimal
from food_ordering.domain.pricing import MenuCatalog


class SpyPayment:
    """Payment method that records every charge instead of logging it."""

    def __init__(self, label: str = "Spy") -> None:
        self.label = label
        self.charges: list[Decimal] = []

    def pay(self, amount: Decimal) -> PaymentConfirmation:
        self.charges.append(as_decimal(amount))
        return PaymentConfirmation(method=self.label, amount=amount)


@pytest.fixture
def pizza() -> MenuItem:
    return MenuCatalog.ITEMS[MenuChoice.PIZZA]


@pytest.fixture
def burger() -> MenuItem:
    return MenuCatalog.ITEMS[MenuChoice.BURGER]


@pytest.fixture
def salad() -> MenuItem:
    return MenuCatalog.ITEMS[MenuChoice.SALAD]


@pytest.fixture
def cheese() -> AddOn:
    return MenuCatalog.ADD_ONS["cheese"]


@pytest.fixture
def sauce() -> AddOn:
    return MenuCatalog.ADD_ONS["sauce"]


@pytest.fixture
def spy_payment() -> SpyPayment:
    return SpyPayment()


@pytest.fixture
def scripted():
    """Build a ScriptedIO from answers given in prompt order."""

    def _make(*answers: str) -> ScriptedIO:
        return ScriptedIO(answers)

    return _make
