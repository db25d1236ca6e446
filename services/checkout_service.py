# services/checkout_service.py

from datetime import datetime
from models.order import Order, OrderItem
from utils.logger import get_logger

EMPTY_CART_MESSAGE = "Your cart is empty."
ORDER_CONFIRMED_MESSAGE = "Thank you for your order!"


class CheckoutService:
    # Simulated checkout: no payment, nothing persisted.
    # Two outcomes: empty cart -> warn and leave everything as is,
    # otherwise -> snapshot an Order, clear the cart, confirm.

    def __init__(self, cart_service, notifier):
        self.cart = cart_service
        self.notifier = notifier
        self.logger = get_logger("checkout")
        self._order_seq = 0

    def checkout(self) -> Order | None:
        if self.cart.is_empty():
            self.logger.info("checkout refused: cart is empty")
            self.notifier.show(EMPTY_CART_MESSAGE)
            return None

        order_items: list[OrderItem] = []
        for entry in self.cart.entries():
            order_items.append(
                OrderItem(
                    product_id=entry.product.id,
                    name=entry.product.name,
                    qty=entry.quantity,
                    unit_price=entry.product.price,
                    subtotal=round(entry.line_total, 2),
                )
            )

        self._order_seq += 1
        order = Order(
            order_id=f"ORD-{self._order_seq:06d}",
            created_at=datetime.now(),
            items=order_items,
            total=self.cart.total(),
        )

        # Clearing publishes the change, which refreshes the cart view
        self.cart.clear()

        self.logger.info(
            f"checkout success order_id={order.order_id}, total={order.total}, "
            f"lines={len(order.items)}"
        )
        self.notifier.show(ORDER_CONFIRMED_MESSAGE)
        return order
