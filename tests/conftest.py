"""Shared pytest fixtures for the storefront tests."""

import pytest

from models.product import DEFAULT_PRODUCTS, Catalogue
from services.cart_service import CartService
from services.notification_service import Notifier
from services.store_service import StoreService


class FakeScheduler:
    """Stand-in for the Tk root: records after() calls instead of running a loop."""

    def __init__(self):
        self.now = 0
        self._next_id = 0
        self.pending = {}  # id -> (due, func)
        self.cancelled = []

    def after(self, ms, func):
        self._next_id += 1
        timer_id = f"after#{self._next_id}"
        self.pending[timer_id] = (self.now + ms, func)
        return timer_id

    def after_cancel(self, timer_id):
        self.cancelled.append(timer_id)
        self.pending.pop(timer_id, None)

    def advance(self, ms):
        """Move the clock forward and fire every timer that came due."""
        self.now += ms
        due = sorted(
            (when, timer_id) for timer_id, (when, _) in self.pending.items()
            if when <= self.now
        )
        for _, timer_id in due:
            _, func = self.pending.pop(timer_id)
            func()


@pytest.fixture
def catalogue():
    return Catalogue(DEFAULT_PRODUCTS)


@pytest.fixture
def cart(catalogue):
    return CartService(catalogue)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def notifier(scheduler):
    return Notifier(scheduler)


@pytest.fixture
def store(cart, notifier):
    return StoreService(cart, notifier)
