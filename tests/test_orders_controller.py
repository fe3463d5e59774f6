"""Tests for the orders page controller."""

from controllers.orders_controller import OrdersController
from models.items import OrderRecord
from models.repositories import PersistenceError


def test_get_orders_with_total(service, settings):
    service.save_orders([OrderRecord("Milk", 50, None), OrderRecord("Bread", 40, None)])

    summary = OrdersController(service=service, settings=settings).get_orders()

    assert [o.name for o in summary.orders] == ["Milk", "Bread"]
    assert summary.total == 90
    assert summary.error is None


def test_get_orders_empty(service, settings):
    summary = OrdersController(service=service, settings=settings).get_orders()

    assert summary.orders == []
    assert summary.total == 0


def test_get_orders_store_failure(service, settings, monkeypatch):
    def broken_load():
        raise PersistenceError("corrupt")

    monkeypatch.setattr(service, "load_orders", broken_load)

    summary = OrdersController(service=service, settings=settings).get_orders()

    assert summary.orders == []
    assert summary.error == "Could not load your orders"


def test_checkout_then_orders_page(controller, service, settings, sample_items):
    controller.service.update_items(sample_items)
    controller.checkout()

    summary = OrdersController(service=service, settings=settings).get_orders()

    assert summary.orders == [item.to_order() for item in sample_items]
    assert summary.total == 160


def test_orders_total_uses_fees(service, settings):
    service.save_orders([OrderRecord("Milk", 50, None), OrderRecord("Bread", 40, None)])
    priced = settings.model_copy(update={"delivery_fee": 30, "discount": 10})

    summary = OrdersController(service=service, settings=priced).get_orders()

    assert summary.total == 110
