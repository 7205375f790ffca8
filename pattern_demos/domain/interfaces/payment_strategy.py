"""Interface for payment methods (Strategy Pattern).

This allows switching between different payment methods at checkout:
- Credit card
- PayPal
- Cash
"""
from abc import ABC, abstractmethod


class IPaymentStrategy(ABC):
    """
    Interface for payment methods following Strategy Pattern.
    
    Implementations can be swapped without changing the shopping cart.
    """
    
    @abstractmethod
    def pay(self, amount: int) -> None:
        """
        Pay the given amount.
        
        Args:
            amount: Amount to pay, in whole dollars
        """
        pass
