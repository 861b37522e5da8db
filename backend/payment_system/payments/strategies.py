"""
Payment strategies.

Each strategy wraps the credentials of one payment method and knows how to
"pay" an amount with them. Paying only reports the action on standard
output; no external system is contacted.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type, Union
import inspect
import logging

from payment_system.payments.exceptions import InvalidCredentialsError, UnsupportedPaymentMethodError


logger = logging.getLogger(__name__)

Amount = Union[int, float]


class PaymentStrategy(ABC):
    """Interface shared by every payment method."""

    method: str = ""
    display_name: str = ""

    @abstractmethod
    def pay(self, amount: Amount) -> None:
        """Pay ``amount`` through this payment method."""

    def describe(self, amount: Amount) -> str:
        return f"Paid {amount} via {self.display_name}."

    def _report(self, amount: Amount) -> None:
        message = self.describe(amount)
        logger.debug(message)
        print(message)


class CreditCardPayment(PaymentStrategy):
    method = "credit_card"
    display_name = "credit card"

    def __init__(self, card_number: str, expiry_date: str, cvv: str):
        self.card_number = card_number
        self.expiry_date = expiry_date
        self.cvv = cvv

    @property
    def last4(self) -> Optional[str]:
        digits = str(self.card_number).replace(" ", "")
        return digits[-4:] or None

    @property
    def masked_card_number(self) -> str:
        return f"****{self.last4}" if self.last4 else ""

    def pay(self, amount: Amount) -> None:
        self._report(amount)

    def __repr__(self) -> str:
        return f"CreditCardPayment(card_number={self.masked_card_number!r}, expiry_date={self.expiry_date!r})"


class PayPalPayment(PaymentStrategy):
    method = "paypal"
    display_name = "PayPal"

    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def pay(self, amount: Amount) -> None:
        self._report(amount)

    def __repr__(self) -> str:
        return f"PayPalPayment(email={self.email!r})"


# Maps payment method keys to their strategy classes
PAYMENT_METHODS: Dict[str, Type[PaymentStrategy]] = {
    CreditCardPayment.method: CreditCardPayment,
    PayPalPayment.method: PayPalPayment,
}


def register_payment_method(strategy_cls: Type[PaymentStrategy]) -> Type[PaymentStrategy]:
    """
    Register an additional strategy class under its ``method`` key.

    Usable as a class decorator.
    """
    if not strategy_cls.method:
        raise ValueError(f"{strategy_cls.__name__} must define a 'method' key")
    PAYMENT_METHODS[strategy_cls.method] = strategy_cls
    logger.debug(f"Payment method '{strategy_cls.method}' registered")
    return strategy_cls


def create_strategy(method: str, **credentials) -> PaymentStrategy:
    """
    Build the strategy registered for ``method`` from raw credentials.

    Raises:
        UnsupportedPaymentMethodError: if no strategy is registered for ``method``
        InvalidCredentialsError: if ``credentials`` do not match the strategy constructor
    """
    strategy_cls = PAYMENT_METHODS.get(method)
    if strategy_cls is None:
        raise UnsupportedPaymentMethodError(method, supported=sorted(PAYMENT_METHODS))
    try:
        inspect.signature(strategy_cls).bind(**credentials)
    except TypeError as e:
        raise InvalidCredentialsError(method, str(e)) from e
    return strategy_cls(**credentials)
