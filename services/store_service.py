# services/store_service.py
from models.order import Order
from services.cart_service import CartService
from services.checkout_service import CheckoutService
from services.notification_service import Notifier


class StoreService:
    # What the storefront buttons call. Wraps the cart operations with the
    # user-facing messages; checkout is delegated to CheckoutService.

    def __init__(self, cart: CartService, notifier: Notifier):
        self.cart = cart
        self.notifier = notifier
        self.checkout_service = CheckoutService(cart, notifier)

    def add_to_cart(self, product_id: int):
        entry = self.cart.add(product_id)
        if entry is None:
            return None
        self.notifier.show(f"Added {entry.product.name} to cart.")
        return entry

    def remove_from_cart(self, product_id: int):
        return self.cart.remove(product_id)

    def checkout(self) -> Order | None:
        return self.checkout_service.checkout()
