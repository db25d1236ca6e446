# services/render_service.py
# View projections: plain data built from the catalogue / cart state.
# gui.py turns these into Tk widgets, replacing whatever was there before.
from dataclasses import dataclass, field

from utils.formatters import format_cart_line, format_money, format_total

EMPTY_CART_TEXT = "Cart is empty."
ADD_BUTTON_TEXT = "Add to Cart"
REMOVE_BUTTON_TEXT = "Remove"


class MountPointError(RuntimeError):
    # The view cannot start without somewhere to draw into.
    pass


@dataclass(frozen=True)
class ProductCard:
    product_id: int
    title: str
    description: str
    price_text: str
    image: str
    button_text: str = ADD_BUTTON_TEXT


@dataclass(frozen=True)
class CartRow:
    product_id: int
    text: str
    button_text: str = REMOVE_BUTTON_TEXT


@dataclass(frozen=True)
class CartView:
    total_text: str
    rows: list[CartRow] = field(default_factory=list)
    empty_text: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.rows


def catalogue_cards(catalogue) -> list[ProductCard]:
    # One card per product, catalogue order
    return [
        ProductCard(
            product_id=p.id,
            title=p.name,
            description=p.description,
            price_text=format_money(p.price),
            image=p.image,
        )
        for p in catalogue
    ]


def cart_view(cart) -> CartView:
    total_text = format_total(cart.total())
    if cart.is_empty():
        return CartView(total_text=total_text, empty_text=EMPTY_CART_TEXT)

    rows = [
        CartRow(
            product_id=e.product.id,
            text=format_cart_line(e.product.name, e.quantity, e.line_total),
        )
        for e in cart.entries()
    ]
    return CartView(total_text=total_text, rows=rows)


def require_mount_points(**mounts):
    """
    Check that every named container / trigger widget exists.

    Accepts widgets (anything with winfo_exists) or plain objects; None
    counts as missing. Raises MountPointError listing every missing name.
    """
    missing = []
    for name, widget in mounts.items():
        if widget is None:
            missing.append(name)
            continue
        exists = getattr(widget, "winfo_exists", None)
        if exists is not None and not exists():
            missing.append(name)
    if missing:
        raise MountPointError(f"Missing mount points: {', '.join(sorted(missing))}")
