"""
Payment Strategy
================

Core Design: Interchangeable payment methods selected at runtime behind one interface.

Design Patterns & Strategies Used:
1. Strategy Pattern - Credit card, PayPal, bank transfer, crypto
2. Context Object - PaymentContext holds the active strategy

Features:
- Masked identifiers in confirmations
- Strategy can be swapped at any time
- Display name and icon per method
"""

from abc import ABC, abstractmethod
from typing import Optional


class NoStrategySelectedError(Exception):
    """Payment attempted before a payment method was chosen"""

    def __init__(self):
        super().__init__("No payment method selected. Please choose one first.")


def mask_tail(value: str, visible: int = 4) -> str:
    """Replace everything but the last `visible` characters with '*'"""
    return value[-visible:].rjust(len(value), "*")


# ==================== STRATEGY PATTERN ====================

class PaymentStrategy(ABC):
    """Payment strategy interface"""

    @abstractmethod
    def pay(self, amount: float) -> str:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_icon(self) -> str:
        pass


class CreditCardStrategy(PaymentStrategy):

    def __init__(self, card_number: str, card_holder: str):
        self._card_number = card_number
        self._card_holder = card_holder

    def pay(self, amount: float) -> str:
        masked = mask_tail(self._card_number)
        return (f"{self.get_icon()} Credit card ({masked}) charged {amount:,}\n"
                f"Card holder: {self._card_holder}")

    def get_name(self) -> str:
        return "Credit Card"

    def get_icon(self) -> str:
        return "💳"


class PayPalStrategy(PaymentStrategy):

    def __init__(self, email: str):
        self._email = email

    def pay(self, amount: float) -> str:
        return f"{self.get_icon()} PayPal ({self._email}) charged {amount:,}"

    def get_name(self) -> str:
        return "PayPal"

    def get_icon(self) -> str:
        return "🅿️"


class BankTransferStrategy(PaymentStrategy):

    def __init__(self, bank_name: str, account_number: str):
        self._bank_name = bank_name
        self._account_number = account_number

    def pay(self, amount: float) -> str:
        masked = mask_tail(self._account_number)
        return f"{self.get_icon()} {self._bank_name} account ({masked}) transferred {amount:,}"

    def get_name(self) -> str:
        return "Bank Transfer"

    def get_icon(self) -> str:
        return "🏦"


class CryptoStrategy(PaymentStrategy):

    def __init__(self, wallet_address: str):
        self._wallet_address = wallet_address

    def pay(self, amount: float) -> str:
        # Fixed width regardless of address length
        masked = f"{self._wallet_address[:6]}...{self._wallet_address[-4:]}"
        return f"{self.get_icon()} Crypto wallet ({masked}) paid the equivalent of {amount:,}"

    def get_name(self) -> str:
        return "Cryptocurrency"

    def get_icon(self) -> str:
        return "₿"


# ==================== CONTEXT ====================

class PaymentContext:
    """Holds at most one active strategy"""

    def __init__(self):
        self._strategy: Optional[PaymentStrategy] = None

    def set_strategy(self, strategy: PaymentStrategy):
        self._strategy = strategy

    def execute_payment(self, amount: float) -> str:
        if self._strategy is None:
            raise NoStrategySelectedError()
        return self._strategy.pay(amount)

    def get_current_strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PAYMENT STRATEGY DEMONSTRATION")
    print("=" * 60)
    print()

    context = PaymentContext()

    print("1. Paying without a method:")
    try:
        context.execute_payment(100)
    except NoStrategySelectedError as e:
        print(f"Error: {e}")
    print()

    print("2. Switching methods at runtime:")
    strategies = [
        CreditCardStrategy("1234567890123456", "Jane Doe"),
        PayPalStrategy("jane@example.com"),
        BankTransferStrategy("First Bank", "110234567890"),
        CryptoStrategy("0xABCDEF1234567890"),
    ]
    for strategy in strategies:
        context.set_strategy(strategy)
        current = context.get_current_strategy()
        print(f"[{current.get_icon()} {current.get_name()}]")
        print(context.execute_payment(25000))
        print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Strategy Pattern - Payment methods")
    print("2. Context - Runtime selection")
    print("=" * 60)


if __name__ == "__main__":
    main()
