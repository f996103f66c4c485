"""
Payment Adapter
===============

Core Design: Let clients written against an old payment interface use a new gateway
whose method has a different name and parameter.

Design Patterns & Strategies Used:
1. Adapter Pattern - Object adapter wrapping the new gateway
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging


class OldPaymentProcessor(ABC):
    """Target interface the client code expects"""

    @abstractmethod
    def pay(self, amount: float) -> None:
        pass


class NewPaymentGateway:
    """Adaptee with an incompatible method signature"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def make_payment(self, value: float) -> None:
        self.logger.info("Processed %s through the new payment gateway", value)


class PaymentAdapter(OldPaymentProcessor):
    """Renames pay(amount) to make_payment(value), amount untouched"""

    def __init__(self, gateway: NewPaymentGateway):
        self.gateway = gateway

    def pay(self, amount: float) -> None:
        self.gateway.make_payment(amount)


def process_payment(processor: OldPaymentProcessor, amount: float):
    """Client code, only knows the old interface"""
    processor.pay(amount)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("PAYMENT ADAPTER DEMONSTRATION")
    print("=" * 60)
    print()

    adapter = PaymentAdapter(NewPaymentGateway())
    process_payment(adapter, 15000)
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Adapter Pattern - Old interface over the new gateway")
    print("=" * 60)


if __name__ == "__main__":
    main()
