"""
Tests for payment methods and the payment factory
"""

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from food_ordering.domain.errors import InvalidSelection
from food_ordering.domain.models import PaymentChoice
from food_ordering.services.factory import PaymentFactory
from food_ordering.services.payment import CreditCardPayment, PayPalPayment


class TestPaymentMethods:
    """Test simulated payments"""

    def test_labels(self):
        assert CreditCardPayment().label == "Credit Card"
        assert PayPalPayment().label == "PayPal"

    def test_pay_returns_confirmation(self):
        confirmation = CreditCardPayment().pay(Decimal("15.00"))
        assert confirmation.method == "Credit Card"
        assert confirmation.amount == Decimal("15.00")
        assert confirmation.message == "Paid $15.00 using Credit Card."

    def test_pay_logs_the_charge(self, caplog):
        with caplog.at_level(logging.INFO, logger="food_ordering.services.payment"):
            PayPalPayment().pay(Decimal("8.5"))
        assert "Charging $8.50 via PayPal" in caplog.text

    def test_zero_amount_allowed(self):
        assert PayPalPayment().pay(Decimal("0")).message == "Paid $0.00 using PayPal."

    @pytest.mark.parametrize(
        "amount,cents",
        [("10.625", "10.63"), ("10.624", "10.62"), ("0.005", "0.01"), ("8.5", "8.50")],
    )
    def test_amount_rounded_half_up_to_cents(self, amount, cents):
        confirmation = CreditCardPayment().pay(Decimal(amount))
        assert confirmation.amount == Decimal(cents)
        assert str(confirmation.amount) == cents
        assert confirmation.message == f"Paid ${cents} using Credit Card."

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            CreditCardPayment().pay(Decimal("-1"))


class TestPaymentFactory:
    """Test payment code resolution"""

    def test_codes_map_to_methods(self):
        assert isinstance(PaymentFactory.get_payment_method(1), CreditCardPayment)
        assert isinstance(PaymentFactory.get_payment_method(2), PayPalPayment)

    def test_instances_are_cached(self):
        assert PaymentFactory.get_payment_method(PaymentChoice.PAYPAL) is PaymentFactory.get_payment_method(2)

    @pytest.mark.parametrize("code", [0, 3, 9])
    def test_invalid_code(self, code):
        with pytest.raises(InvalidSelection) as excinfo:
            PaymentFactory.get_payment_method(code)
        assert excinfo.value.field == "payment"
        assert str(excinfo.value) == f"Invalid payment option: {code}"

    def test_choice(self):
        assert PaymentFactory.choice(1) is PaymentChoice.CREDIT_CARD
