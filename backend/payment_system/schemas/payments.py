from typing import Dict, Optional
from pydantic import BaseModel


class CreditCardPaymentRequest(BaseModel):
    card_number: str
    expiry_date: str
    cvv: str
    amount: float


class PayPalPaymentRequest(BaseModel):
    email: str
    password: str
    amount: float


class PaymentData(BaseModel):
    method: str
    amount: float
    card_last4: Optional[str] = None


class PaymentResponse(BaseModel):
    success: bool
    message: str
    data: PaymentData


class MethodPaymentRequest(BaseModel):
    amount: float
    credentials: Dict[str, str] = {}
