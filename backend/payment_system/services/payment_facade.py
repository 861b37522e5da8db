from typing import Optional
import logging

from payment_system.core.payment_manager import PaymentManager
from payment_system.payments.strategies import (
    Amount,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
    create_strategy,
)


logger = logging.getLogger(__name__)


class PaymentFacade:
    """
    Simplified entry point for making payments.

    Callers pass raw credentials; the facade builds the matching strategy and
    hands it to the payment manager. A manager can be injected, otherwise the
    process-wide singleton is used.
    """

    def __init__(self, manager: Optional[PaymentManager] = None):
        self._manager = manager if manager is not None else PaymentManager.get_instance()

    @property
    def manager(self) -> PaymentManager:
        return self._manager

    def process_credit_card_payment(self, card_number: str, expiry_date: str, cvv: str, amount: Amount) -> None:
        """Pay ``amount`` with a credit card."""
        strategy = CreditCardPayment(card_number, expiry_date, cvv)
        self._manager.process_payment(strategy, amount)

    def process_paypal_payment(self, email: str, password: str, amount: Amount) -> None:
        """Pay ``amount`` with a PayPal account."""
        strategy = PayPalPayment(email, password)
        self._manager.process_payment(strategy, amount)

    def process_payment(self, method: str, amount: Amount, **credentials) -> PaymentStrategy:
        """
        Pay ``amount`` with any registered payment method.

        Args:
            method: Registry key of the payment method, e.g. "credit_card"
            amount: The amount to pay
            **credentials: Constructor arguments of the strategy

        Returns:
            The strategy the payment was made with

        Raises:
            UnsupportedPaymentMethodError: if ``method`` is not registered
            InvalidCredentialsError: if ``credentials`` do not fit the strategy
        """
        strategy = create_strategy(method, **credentials)
        logger.debug(f"Built {strategy!r} for method '{method}'")
        self._manager.process_payment(strategy, amount)
        return strategy
