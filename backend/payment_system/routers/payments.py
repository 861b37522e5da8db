from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from payment_system.core.dependencies import get_payment_facade
from payment_system.payments.exceptions import PaymentError
from payment_system.payments.strategies import CreditCardPayment
from payment_system.schemas.payments import (
    CreditCardPaymentRequest,
    PayPalPaymentRequest,
    MethodPaymentRequest,
    PaymentResponse,
)
from payment_system.services.payment_facade import PaymentFacade


router = APIRouter(tags=["Payments"], prefix="/payments")


def _payment_response(method: str, amount: float, card_last4: Optional[str] = None) -> dict:
    return {
        "success": True,
        "message": f"Payment of {amount} processed via {method}",
        "data": {"method": method, "amount": amount, "card_last4": card_last4},
    }


@router.post("/credit-card", status_code=status.HTTP_200_OK, response_model=PaymentResponse)
def pay_with_credit_card(
        payment: CreditCardPaymentRequest,
        facade: PaymentFacade = Depends(get_payment_facade)):
    facade.process_credit_card_payment(
        payment.card_number, payment.expiry_date, payment.cvv, payment.amount
    )
    last4 = payment.card_number.replace(" ", "")[-4:] or None
    return _payment_response("credit_card", payment.amount, card_last4=last4)


@router.post("/paypal", status_code=status.HTTP_200_OK, response_model=PaymentResponse)
def pay_with_paypal(
        payment: PayPalPaymentRequest,
        facade: PaymentFacade = Depends(get_payment_facade)):
    facade.process_paypal_payment(payment.email, payment.password, payment.amount)
    return _payment_response("paypal", payment.amount)


@router.post("/{method}", status_code=status.HTTP_200_OK, response_model=PaymentResponse)
def pay_with_method(
        method: str,
        payment: MethodPaymentRequest,
        facade: PaymentFacade = Depends(get_payment_facade)):
    try:
        strategy = facade.process_payment(method, payment.amount, **payment.credentials)
    except PaymentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_dict()
        )
    last4 = strategy.last4 if isinstance(strategy, CreditCardPayment) else None
    return _payment_response(method, payment.amount, card_last4=last4)
