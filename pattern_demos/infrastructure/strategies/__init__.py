"""Interchangeable payment methods."""

from pattern_demos.infrastructure.strategies.payment_strategies import (
    CreditCardPayment,
    PayPalPayment,
    CashPayment,
)

__all__ = ["CreditCardPayment", "PayPalPayment", "CashPayment"]
