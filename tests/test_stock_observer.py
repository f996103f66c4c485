import logging

from stock_observer import ALERT_THRESHOLD, Observer, PriceAlert, PriceDisplay, Stock


class RecordingObserver(Observer):

    def __init__(self, name: str = "", journal=None):
        self.name = name
        self.journal = journal if journal is not None else []
        self.prices = []

    def update(self, price: float):
        self.prices.append(price)
        self.journal.append(self.name)


def test_initial_price_is_zero():
    assert Stock().get_price() == 0


def test_set_price_notifies_synchronously():
    stock = Stock()
    observer = RecordingObserver()
    stock.register(observer)
    stock.set_price(42)
    assert stock.get_price() == 42
    assert observer.prices == [42]


def test_registration_order_is_notify_order():
    journal = []
    stock = Stock()
    for name in ("a", "b", "c"):
        stock.register(RecordingObserver(name, journal))
    stock.set_price(1)
    assert journal == ["a", "b", "c"]


def test_duplicate_registration_notifies_twice():
    stock = Stock()
    observer = RecordingObserver()
    stock.register(observer)
    stock.register(observer)
    stock.set_price(150)
    assert observer.prices == [150, 150]


def test_unregister_removes_all_references():
    stock = Stock()
    observer = RecordingObserver()
    other = RecordingObserver()
    stock.register(observer)
    stock.register(other)
    stock.register(observer)
    stock.unregister(observer)
    stock.set_price(5)
    assert observer.prices == []
    assert other.prices == [5]


def test_unregister_unknown_observer_is_noop():
    stock = Stock()
    stock.unregister(RecordingObserver())
    stock.set_price(1)


def test_price_display_tracks_last_price(caplog):
    stock = Stock()
    display = PriceDisplay()
    stock.register(display)
    with caplog.at_level(logging.INFO, logger="stock_observer"):
        stock.set_price(99)
    assert display.get_last_price() == 99
    assert "99" in caplog.text


def test_price_alert_only_above_threshold(caplog):
    stock = Stock()
    alert = PriceAlert()
    stock.register(alert)
    with caplog.at_level(logging.INFO, logger="stock_observer"):
        stock.set_price(ALERT_THRESHOLD)
        stock.set_price(ALERT_THRESHOLD + 1)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert str(ALERT_THRESHOLD + 1) in warnings[0].getMessage()
    assert alert.get_last_price() == ALERT_THRESHOLD + 1
