"""
Simple factory for payment method singletons.

Console payment codes are resolved here and nowhere else. Each method
class is stateless, so one cached instance per class is enough.
"""

from food_ordering.domain.errors import InvalidSelection
from food_ordering.domain.models import PaymentChoice
from food_ordering.services.payment import CreditCardPayment, PaymentMethod, PayPalPayment


class PaymentFactory:
    """Lazily creates and caches payment methods (class-level singletons)."""

    METHODS: dict[PaymentChoice, type[PaymentMethod]] = {
        PaymentChoice.CREDIT_CARD: CreditCardPayment,
        PaymentChoice.PAYPAL: PayPalPayment,
    }
    _instances: dict[PaymentChoice, PaymentMethod] = {}

    @classmethod
    def choice(cls, code: int) -> PaymentChoice:
        try:
            return PaymentChoice(code)
        except ValueError:
            raise InvalidSelection("payment", code) from None

    @classmethod
    def get_payment_method(cls, code: int) -> PaymentMethod:
        choice = cls.choice(code)
        if choice not in cls._instances:
            cls._instances[choice] = cls.METHODS[choice]()
        return cls._instances[choice]
