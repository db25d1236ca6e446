# models/order.py
from dataclasses import dataclass
from datetime import datetime


# Receipt produced by a simulated checkout. Lives in memory only.
@dataclass
class OrderItem:
    product_id: int
    name: str
    qty: int
    unit_price: float
    subtotal: float


@dataclass
class Order:
    order_id: str
    created_at: datetime
    items: list[OrderItem]
    total: float
