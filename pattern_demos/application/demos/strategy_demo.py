"""Strategy pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.application.services.shopping_cart import ShoppingCart
from pattern_demos.infrastructure.strategies.payment_strategies import (
    CreditCardPayment,
    PayPalPayment,
    CashPayment
)


class StrategyDemo(IDemo):
    """Checks out the same cart with three different payment methods."""
    
    def get_name(self) -> str:
        return "strategy"
    
    def get_description(self) -> str:
        return "Strategy: pay by credit card, PayPal or cash without changing the cart"
    
    def run(self) -> None:
        cart = ShoppingCart()
        
        cart.set_payment_strategy(CreditCardPayment("1234-5678-9012-3456", "John Doe"))
        cart.checkout(100)
        
        cart.set_payment_strategy(PayPalPayment("john.doe@email.com"))
        cart.checkout(250)
        
        cart.set_payment_strategy(CashPayment())
        cart.checkout(50)
