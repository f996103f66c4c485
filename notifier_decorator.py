"""
Notifier Decorator
==================

Core Design: Wrap a notification sender in layers, each adding one more delivery channel.

Design Patterns & Strategies Used:
1. Decorator Pattern - Stackable channel wrappers around a base notifier
2. Template Method - Decorator.send delegates inward, then runs the layer's own delivery

Features:
- Email, SMS and Slack layers
- Any order, any depth
- Inner layers always deliver before outer layers
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging


# ==================== COMPONENT ====================

class Notifier(ABC):
    """Component interface"""

    @abstractmethod
    def send(self, message: str) -> None:
        pass


class BaseNotifier(Notifier):
    """Concrete component - the foundational send"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def send(self, message: str) -> None:
        self.logger.info("Base notification: %s", message)


# ==================== DECORATOR PATTERN ====================

class NotifierDecorator(Notifier):
    """Wraps any notifier, the wrapped reference is fixed at construction"""

    def __init__(self, notifier: Notifier, logger: Optional[logging.Logger] = None):
        self._wrappee = notifier
        self.logger = logger or logging.getLogger(__name__)

    @property
    def wrappee(self) -> Notifier:
        return self._wrappee

    def send(self, message: str) -> None:
        self._wrappee.send(message)
        self._deliver(message)

    @abstractmethod
    def _deliver(self, message: str) -> None:
        """Channel-specific action of this layer"""
        pass


class EmailNotifier(NotifierDecorator):

    def _deliver(self, message: str) -> None:
        self.logger.info("Email sent: %s", message)


class SMSNotifier(NotifierDecorator):

    def _deliver(self, message: str) -> None:
        self.logger.info("SMS sent: %s", message)


class SlackNotifier(NotifierDecorator):

    def _deliver(self, message: str) -> None:
        self.logger.info("Slack message sent: %s", message)


# ==================== DEMONSTRATION ====================

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("NOTIFIER DECORATOR DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Base only:")
    BaseNotifier().send("Server restarted")
    print()

    print("2. Base + Email + SMS + Slack:")
    notifier = SlackNotifier(SMSNotifier(EmailNotifier(BaseNotifier())))
    notifier.send("Deployment finished")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Decorator Pattern - Channels layered at runtime")
    print("2. Explicit delegation - Inner layer first, own channel last")
    print("=" * 60)


if __name__ == "__main__":
    main()
