# utils/formatters.py
# Text formatting shared by the view projections.
from utils.settings import CURRENCY_SYMBOL


def format_money(amount: float) -> str:
    # 699.99 -> "$699.99"
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_cart_line(name: str, qty: int, line_total: float) -> str:
    # "Smartphone x 2 ($1399.98)"
    return f"{name} x {qty} ({format_money(line_total)})"


def format_total(total: float) -> str:
    return f"Total: {format_money(total)}"
