"""Tests for the NotificationService."""

from shopflow.application.notification_service import NotificationService
from shopflow.domain.model.order import Order
from tests.fakes import FakeReporter


class TestSendNotification:

    def test_forwards_status(self):
        reporter = FakeReporter()
        NotificationService(reporter).send_notification("Order processed")
        assert reporter.messages == ["Notification: Order processed"]

    def test_subscribe_to_order(self):
        reporter = FakeReporter()
        service = NotificationService(reporter)
        order = Order(1)

        service.subscribe_to(order)
        order.change_status("shipped")
        order.change_status("delivered")

        assert reporter.messages == ["Notification: shipped", "Notification: delivered"]

    def test_unsubscribe_bound_method(self):
        reporter = FakeReporter()
        service = NotificationService(reporter)
        order = Order(1)
        service.subscribe_to(order)

        order.unsubscribe(service.send_notification)
        order.change_status("shipped")

        assert reporter.messages == []
