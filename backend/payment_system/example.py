"""
Example usage of the payment facade.

Makes one credit card payment and one PayPal payment with hard-coded
values. Run with ``python -m payment_system.example`` or the
``payment-example`` console script.
"""

import logging
from payment_system.core.config_manager import config_manager
from payment_system.services.payment_facade import PaymentFacade


def main():
    logging.basicConfig(
        level=config_manager.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    payment_facade = PaymentFacade()

    # Credit card payment
    payment_facade.process_credit_card_payment("1234 5678 9101 1121", "12/25", "123", 100.0)

    # PayPal payment
    payment_facade.process_paypal_payment("example@example.com", "password", 50.0)


if __name__ == "__main__":
    main()
