# services/cart_service.py
from typing import Callable, List

from models.cart import CartEntry, CartStore
from models.product import Catalogue
from utils.logger import get_logger


class CartService:
    """
    Cart operations over a CartStore.

    The service never touches the view. After every mutation that changed
    the cart it calls the subscribed listeners (synchronously, in
    subscription order) with itself; the GUI subscribes its cart renderer.
    """

    def __init__(self, catalogue: Catalogue, store: CartStore | None = None):
        self.catalogue = catalogue
        self.store = store if store is not None else CartStore()
        self.logger = get_logger("cart")
        self._listeners: List[Callable[["CartService"], None]] = []

    def subscribe(self, listener: Callable[["CartService"], None]):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[["CartService"], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self):
        for listener in list(self._listeners):
            listener(self)

    def add(self, product_id: int) -> CartEntry | None:
        product = self.catalogue.get(product_id)
        if product is None:
            # ids come from the catalogue, so this is a wiring bug; keep the cart intact
            self.logger.warning(f"cart add ignored: unknown product id {product_id!r}")
            return None

        entry = self.store.increment(product)
        self.logger.info(f"cart add {product.id} ({product.name}) -> qty {entry.quantity}")
        self._changed()
        return entry

    def remove(self, product_id: int) -> CartEntry | None:
        entry = self.store.decrement(product_id)
        if entry is None:
            return None

        if entry.quantity <= 0:
            self.logger.info(f"cart remove {product_id}: entry deleted")
        else:
            self.logger.info(f"cart remove {product_id} -> qty {entry.quantity}")
        self._changed()
        return entry

    def clear(self):
        self.store.clear()
        self.logger.info("cart cleared")
        self._changed()

    def total(self) -> float:
        # Recomputed on every call
        return self.store.total()

    def entries(self) -> list[CartEntry]:
        return list(self.store.entries.values())

    def get(self, product_id: int) -> CartEntry | None:
        return self.store.entries.get(product_id)

    def is_empty(self) -> bool:
        return len(self.store) == 0

    def item_count(self) -> int:
        return sum(e.quantity for e in self.store.entries.values())

    def __len__(self) -> int:
        return len(self.store)
