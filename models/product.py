# models/product.py
import math
from dataclasses import dataclass

# Grey 400x250 placeholder with the word "Image" centred on it
PLACEHOLDER_IMAGE = "placeholder:image"


# Product model representing one catalogue entry. Frozen: the cart holds
# references to these, so prices cannot drift between catalogue and cart.
@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: float
    image: str = PLACEHOLDER_IMAGE

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError(f"Product id must be a positive integer, got {self.id!r}")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"Price of product {self.id} must be a non-negative number.")
        if not isinstance(self.image, str):
            raise ValueError(f"Image of product {self.id} must be a string, got {self.image!r}")


class Catalogue:
    """
    Ordered, read-only sequence of products with lookup by id.

    get() on an unknown id returns None instead of raising; ids normally
    come from the catalogue itself, so a miss is left to the caller.
    """

    def __init__(self, products):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[int, Product] = {}
        for p in self._products:
            if p.id in self._by_id:
                raise ValueError(f"Duplicate product id: {p.id}")
            self._by_id[p.id] = p

    def get(self, product_id: int) -> Product | None:
        return self._by_id.get(product_id)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def __contains__(self, product_id) -> bool:
        return product_id in self._by_id

    def __iter__(self):
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)


DEFAULT_PRODUCTS = (
    Product(
        id=1,
        name="Smartphone",
        description="Latest smartphone with high performance.",
        price=699.99,
    ),
    Product(
        id=2,
        name="Headphones",
        description="Noise cancelling headphones.",
        price=199.99,
    ),
    Product(
        id=3,
        name="Laptop",
        description="Powerful laptop for professionals.",
        price=1299.99,
    ),
)
