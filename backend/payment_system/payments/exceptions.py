"""
Exceptions raised by the payment layer.

Amounts and credentials are not validated, so the only failures are
programming errors at the wiring level: a missing strategy or an unknown
payment method key.
"""

from typing import Any, Dict, Optional


class PaymentError(Exception):
    """
    Base exception for payment errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        method: Payment method key involved, if known
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        code: str = "PAYMENT_ERROR",
        method: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.method = method
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "method": self.method,
            "details": self.details,
        }


class InvalidPaymentStrategyError(PaymentError):
    """Raised when a payment is dispatched without a usable strategy."""

    def __init__(self, strategy: Any):
        super().__init__(
            f"Expected a PaymentStrategy, got {type(strategy).__name__}",
            code="INVALID_STRATEGY",
            details={"received_type": type(strategy).__name__},
        )


class UnsupportedPaymentMethodError(PaymentError):
    """Raised when no strategy is registered for a payment method key."""

    def __init__(self, method: str, supported: Optional[list] = None):
        super().__init__(
            f"Unsupported payment method: {method}",
            code="UNSUPPORTED_METHOD",
            method=method,
            details={"supported_methods": supported or []},
        )


class InvalidCredentialsError(PaymentError):
    """Raised when the credentials do not fit the payment method's strategy."""

    def __init__(self, method: str, reason: str):
        super().__init__(
            f"Invalid credentials for payment method '{method}': {reason}",
            code="INVALID_CREDENTIALS",
            method=method,
            details={"reason": reason},
        )
