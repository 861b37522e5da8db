"""
FastAPI Dependencies with Singleton Pattern Integration

Dependency functions that hand the singleton managers and the payment
facade to route handlers.
"""

from fastapi import Depends
from payment_system.core.service_manager import service_manager
from payment_system.core.config_manager import config_manager
from payment_system.core.payment_manager import PaymentManager, payment_manager
from payment_system.services.payment_facade import PaymentFacade


def get_service_manager():
    """
    FastAPI dependency to get the service manager.

    Returns:
        The singleton service manager instance
    """
    return service_manager


def get_config_manager():
    """
    FastAPI dependency to get the configuration manager.

    Returns:
        The singleton configuration manager instance
    """
    return config_manager


def get_payment_manager() -> PaymentManager:
    """
    FastAPI dependency to get the payment manager.

    Returns:
        The singleton payment manager instance
    """
    return payment_manager


def get_payment_facade(manager: PaymentManager = Depends(get_payment_manager)) -> PaymentFacade:
    """Provide a payment facade bound to the injected payment manager."""
    return PaymentFacade(manager)


def get_settings():
    """
    FastAPI dependency to get application settings.

    Returns:
        The application settings object
    """
    return config_manager.settings
