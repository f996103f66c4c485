"""
Stock Observer
==============

Core Design: A stock price subject that pushes every price change to its observers.

Design Patterns & Strategies Used:
1. Observer Pattern - Stock (subject) broadcasts to PriceDisplay / PriceAlert

Features:
- Synchronous notification in registration order
- Duplicate registration means duplicate notification
- Threshold alert above a fixed price
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging


ALERT_THRESHOLD = 100


class Observer(ABC):
    """Observer interface"""

    @abstractmethod
    def update(self, price: float):
        pass


class Subject(ABC):
    """Subject interface"""

    @abstractmethod
    def register(self, observer: Observer):
        pass

    @abstractmethod
    def unregister(self, observer: Observer):
        pass

    @abstractmethod
    def notify(self):
        pass


# ==================== SUBJECT ====================

class Stock(Subject):
    """Concrete subject"""

    def __init__(self):
        self._observers: List[Observer] = []
        self._price: float = 0

    def register(self, observer: Observer):
        # No dedup: registering twice means two updates per change
        self._observers.append(observer)

    def unregister(self, observer: Observer):
        """Remove every registration of this exact observer"""
        self._observers = [o for o in self._observers if o is not observer]

    def set_price(self, new_price: float):
        self._price = new_price
        self.notify()

    def notify(self):
        for observer in list(self._observers):
            observer.update(self._price)

    def get_price(self) -> float:
        return self._price


# ==================== OBSERVERS ====================

class PriceDisplay(Observer):
    """Shows every price it receives"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.last_price: float = 0
        self.logger = logger or logging.getLogger(__name__)

    def update(self, price: float):
        self.last_price = price
        self.logger.info("📺 Display: current price = %s", price)

    def get_last_price(self) -> float:
        return self.last_price


class PriceAlert(Observer):
    """Raises an alert when the price goes above the threshold"""

    def __init__(self, threshold: float = ALERT_THRESHOLD,
                 logger: Optional[logging.Logger] = None):
        self.threshold = threshold
        self.last_price: float = 0
        self.logger = logger or logging.getLogger(__name__)

    def update(self, price: float):
        self.last_price = price
        if price > self.threshold:
            self.logger.warning("🚨 Alert: price %s is above %s!", price, self.threshold)

    def get_last_price(self) -> float:
        return self.last_price


# ==================== DEMONSTRATION ====================

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("STOCK OBSERVER DEMONSTRATION")
    print("=" * 60)
    print()

    stock = Stock()
    display = PriceDisplay()
    alert = PriceAlert()
    stock.register(display)
    stock.register(alert)

    print("1. Price below threshold:")
    stock.set_price(90)
    print()

    print("2. Price above threshold:")
    stock.set_price(150)
    print()

    print("3. Display unregistered:")
    stock.unregister(display)
    stock.set_price(120)
    print(f"Display still shows {display.get_last_price()}, alert saw {alert.get_last_price()}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Observer Pattern - Push-based price updates")
    print("=" * 60)


if __name__ == "__main__":
    main()
