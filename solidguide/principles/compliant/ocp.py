"""Open/Closed Principle: new payment types are added, not edited in."""
from abc import ABC, abstractmethod


class PaymentMethod(ABC):
    @abstractmethod
    def pay(self, amount):
        ...


class CreditCardPayment(PaymentMethod):
    def pay(self, amount):
        return f"Processing credit card payment of {amount}"


class PayPalPayment(PaymentMethod):
    def pay(self, amount):
        return f"Processing PayPal payment of {amount}"


class PaymentService:
    def process_payment(self, method: PaymentMethod, amount):
        return method.pay(amount)
