# models/cart.py
from dataclasses import dataclass

from models.product import Product


# One line of the cart: a shared catalogue product plus how many of it.
@dataclass
class CartEntry:
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class CartStore:
    # Mapping product id -> CartEntry, kept in insertion order.
    # Entries with quantity <= 0 are dropped, never stored.

    def __init__(self):
        self.entries: dict[int, CartEntry] = {}

    def increment(self, product: Product) -> CartEntry:
        entry = self.entries.get(product.id)
        if entry is None:
            entry = CartEntry(product, 1)
            self.entries[product.id] = entry
        else:
            entry.quantity += 1
        return entry

    def decrement(self, product_id: int) -> CartEntry | None:
        entry = self.entries.get(product_id)
        if entry is None:
            return None
        entry.quantity -= 1
        if entry.quantity <= 0:
            del self.entries[product_id]
        return entry

    def clear(self):
        self.entries.clear()

    def total(self) -> float:
        return round(sum(e.line_total for e in self.entries.values()), 2)

    def __contains__(self, product_id) -> bool:
        return product_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)
