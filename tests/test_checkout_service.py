"""Tests for the simulated checkout."""

import pytest

from services.checkout_service import EMPTY_CART_MESSAGE, ORDER_CONFIRMED_MESSAGE


class TestCheckout:
    def test_empty_cart(self, store, cart, notifier):
        """Checkout on an empty cart changes nothing and says so."""
        assert store.checkout() is None
        assert cart.is_empty()
        assert notifier.message == EMPTY_CART_MESSAGE

    def test_non_empty_cart_is_cleared(self, store, cart, notifier):
        cart.add(1)
        cart.add(1)
        cart.add(2)

        order = store.checkout()

        assert cart.is_empty()
        assert cart.total() == 0
        assert notifier.message == ORDER_CONFIRMED_MESSAGE
        assert order.total == pytest.approx(1599.97)
        assert [(i.product_id, i.qty) for i in order.items] == [(1, 2), (2, 1)]
        assert order.items[0].subtotal == pytest.approx(1399.98)

    def test_checkout_is_reentrant(self, store, cart, notifier):
        cart.add(3)
        first = store.checkout()
        assert store.checkout() is None
        assert notifier.message == EMPTY_CART_MESSAGE

        cart.add(2)
        second = store.checkout()
        assert first.order_id == "ORD-000001"
        assert second.order_id == "ORD-000002"

    def test_checkout_refreshes_cart_listeners(self, store, cart):
        seen = []
        cart.add(1)
        cart.subscribe(lambda c: seen.append(c.is_empty()))

        store.checkout()
        assert seen == [True]
