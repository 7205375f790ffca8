"""Shopping cart using a swappable payment method (Strategy Pattern context)."""
import logging
from typing import Optional

from pattern_demos.domain.interfaces.payment_strategy import IPaymentStrategy


logger = logging.getLogger(__name__)


class ShoppingCart:
    """
    Cart that delegates payment to whichever strategy is currently set.
    
    The strategy can be changed between checkouts.
    """
    
    def __init__(self, payment_strategy: Optional[IPaymentStrategy] = None):
        self._payment_strategy = payment_strategy
    
    @property
    def payment_strategy(self) -> Optional[IPaymentStrategy]:
        return self._payment_strategy
    
    def set_payment_strategy(self, payment_strategy: IPaymentStrategy) -> None:
        """
        Select the payment method for the next checkout.
        
        Raises:
            ValueError: If payment_strategy does not implement IPaymentStrategy
        """
        if not isinstance(payment_strategy, IPaymentStrategy):
            raise ValueError("Payment strategy must implement IPaymentStrategy")
        self._payment_strategy = payment_strategy
        logger.debug(f"Payment strategy set to {payment_strategy.__class__.__name__}")
    
    def checkout(self, amount: int) -> None:
        """
        Pay for the cart with the selected payment method.
        
        Without a selected method a reminder is printed and nothing is paid.
        
        Args:
            amount: Amount to pay
        """
        if self._payment_strategy is None:
            print("Please select a payment method!")
            return
        self._payment_strategy.pay(amount)
