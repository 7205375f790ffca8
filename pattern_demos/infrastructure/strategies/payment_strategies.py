"""Payment method implementations (Strategy Pattern)."""
from pattern_demos.domain.interfaces.payment_strategy import IPaymentStrategy


class CreditCardPayment(IPaymentStrategy):
    """Pay with a credit card."""
    
    def __init__(self, card_number: str, name: str):
        """
        Initialize credit card payment.
        
        Args:
            card_number: Card number printed on the receipt
            name: Card holder name
        """
        self.card_number = card_number
        self.name = name
    
    def pay(self, amount: int) -> None:
        print(f"{amount}$ paid with credit card: {self.card_number}")


class PayPalPayment(IPaymentStrategy):
    """Pay from a PayPal account."""
    
    def __init__(self, email: str):
        self.email = email
    
    def pay(self, amount: int) -> None:
        print(f"{amount}$ paid using PayPal account: {self.email}")


class CashPayment(IPaymentStrategy):
    
    def pay(self, amount: int) -> None:
        print(f"{amount}$ paid in cash")
