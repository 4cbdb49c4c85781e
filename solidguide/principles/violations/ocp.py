"""Open/Closed Principle: every new payment type means editing this class."""


class PaymentService:
    def process_payment(self, payment_type, amount):
        if payment_type == "credit_card":
            return f"Processing credit card payment of {amount}"
        elif payment_type == "paypal":
            return f"Processing PayPal payment of {amount}"
        raise ValueError(f"Unsupported payment type: {payment_type}")
