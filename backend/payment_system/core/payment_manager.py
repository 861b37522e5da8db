import logging
from payment_system.core.patterns.singleton import Singleton
from payment_system.payments.exceptions import InvalidPaymentStrategyError
from payment_system.payments.strategies import Amount, PaymentStrategy


class PaymentManager(Singleton):
    """
    Singleton Payment Manager.

    Dispatches payments to the strategy supplied by the caller. It keeps no
    business state, so the single shared instance can be used from anywhere.
    """

    def _setup(self):
        """Initialize the payment manager."""
        self._logger = logging.getLogger(__name__)
        self._logger.debug("Payment manager initialized")

    def process_payment(self, strategy: PaymentStrategy, amount: Amount) -> None:
        """
        Pay ``amount`` using ``strategy``.

        Args:
            strategy: The payment strategy to invoke
            amount: The amount to pay; not validated

        Raises:
            InvalidPaymentStrategyError: if ``strategy`` is not a PaymentStrategy
        """
        if not isinstance(strategy, PaymentStrategy):
            self._logger.error(f"Rejected payment with invalid strategy: {type(strategy).__name__}")
            raise InvalidPaymentStrategyError(strategy)

        self._logger.info(f"Processing {strategy.method} payment of {amount}")
        strategy.pay(amount)


# Create the global payment manager instance
payment_manager = PaymentManager.get_instance()
