"""
Payment strategies and the errors they can raise.
"""

from .exceptions import (
    PaymentError,
    InvalidPaymentStrategyError,
    UnsupportedPaymentMethodError,
    InvalidCredentialsError,
)
from .strategies import (
    PaymentStrategy,
    CreditCardPayment,
    PayPalPayment,
    PAYMENT_METHODS,
    register_payment_method,
    create_strategy,
)

__all__ = [
    "PaymentError",
    "InvalidPaymentStrategyError",
    "UnsupportedPaymentMethodError",
    "InvalidCredentialsError",
    "PaymentStrategy",
    "CreditCardPayment",
    "PayPalPayment",
    "PAYMENT_METHODS",
    "register_payment_method",
    "create_strategy",
]
