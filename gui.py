import tkinter as tk
from tkinter import ttk
from pathlib import Path

from utils.logger import setup_logger
from utils.settings import APP_TITLE, WINDOW_GEOMETRY
from data.repository import CatalogueRepository
from services.cart_service import CartService
from services.notification_service import Notifier
from services.render_service import (
    cart_view,
    catalogue_cards,
    require_mount_points,
)
from services.store_service import StoreService

CARD_COLUMNS = 3
IMAGE_WIDTH = 200
IMAGE_HEIGHT = 125


class StorefrontApp:
    def __init__(self, root: tk.Tk, catalogue=None):
        # core services / data
        self.root = root
        self.root.title(APP_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self.logger = setup_logger()
        if catalogue is None:
            catalogue = CatalogueRepository().load_catalogue()
        self.catalogue = catalogue

        # One cart per session, in memory only
        self.cart = CartService(self.catalogue)
        # Tk root doubles as the timer source for the notification
        self.notifier = Notifier(self.root, on_change=self.show_notification)
        self.store = StoreService(self.cart, self.notifier)

        # PhotoImage objects must stay referenced or Tk drops them
        self._images: list[tk.PhotoImage] = []

        self.build_layout()
        require_mount_points(
            products_container=self.products_container,
            cart_items_container=self.cart_items_container,
            cart_total_label=self.cart_total_label,
            notification_label=self.notification_label,
            checkout_button=self.checkout_button,
        )

        # Cart view follows every cart change
        self.cart.subscribe(lambda _cart: self.render_cart())

        # initial fills
        self.render_catalogue()
        self.render_cart()
        self.checkout_button.config(command=self.gui_checkout)

    # Layout: product grid left, cart right, notification bar at the bottom

    def build_layout(self):
        main = ttk.Frame(self.root)
        main.pack(fill="both", expand=True)

        products_frame = ttk.LabelFrame(main, text="Products")
        products_frame.pack(side="left", fill="both", expand=True, padx=10, pady=10)
        self.products_container = ttk.Frame(products_frame)
        self.products_container.pack(fill="both", expand=True, padx=5, pady=5)

        cart_frame = ttk.LabelFrame(main, text="Your Cart")
        cart_frame.pack(side="right", fill="y", padx=10, pady=10)
        self.cart_items_container = ttk.Frame(cart_frame, width=280)
        self.cart_items_container.pack(fill="both", expand=True, padx=5, pady=5)

        self.cart_total_label = ttk.Label(cart_frame, text="", font=("Arial", 12, "bold"))
        self.cart_total_label.pack(pady=(5, 5))

        self.checkout_button = ttk.Button(cart_frame, text="Checkout")
        self.checkout_button.pack(pady=(0, 10))

        self.notification_label = tk.Label(
            self.root,
            text="",
            bg="#333333",
            fg="white",
            padx=10,
            pady=6
        )
        # hidden until a message arrives

    # RENDERING

    def render_catalogue(self):
        for child in self.products_container.winfo_children():
            child.destroy()
        self._images.clear()

        for index, card in enumerate(catalogue_cards(self.catalogue)):
            frame = ttk.Frame(self.products_container, relief="groove", padding=8)
            frame.grid(
                row=index // CARD_COLUMNS,
                column=index % CARD_COLUMNS,
                sticky="n",
                padx=5,
                pady=5
            )

            self._build_image(frame, card.image, card.title).pack()
            ttk.Label(frame, text=card.title, font=("Arial", 12, "bold")).pack(pady=(5, 0))
            ttk.Label(frame, text=card.description, wraplength=IMAGE_WIDTH).pack()
            ttk.Label(frame, text=card.price_text).pack(pady=(2, 5))
            ttk.Button(
                frame,
                text=card.button_text,
                command=lambda pid=card.product_id: self.store.add_to_cart(pid)
            ).pack()

        self.logger.info("GUI: rendered catalogue")

    def _build_image(self, parent, image: str, title: str):
        # Real image files (PNG/GIF) are shown as-is, anything else gets
        # the grey "Image" placeholder.
        path = Path(image)
        if path.suffix.lower() in (".png", ".gif") and path.exists():
            photo = tk.PhotoImage(file=str(path))
            self._images.append(photo)
            return ttk.Label(parent, image=photo, text=title)

        canvas = tk.Canvas(
            parent,
            width=IMAGE_WIDTH,
            height=IMAGE_HEIGHT,
            bg="#cccccc",
            highlightthickness=0
        )
        canvas.create_text(
            IMAGE_WIDTH // 2,
            IMAGE_HEIGHT // 2,
            text="Image",
            fill="#666666",
            font=("Arial", 16)
        )
        return canvas

    def render_cart(self):
        for child in self.cart_items_container.winfo_children():
            child.destroy()

        view = cart_view(self.cart)
        if view.is_empty:
            ttk.Label(self.cart_items_container, text=view.empty_text).pack(anchor="w")
        else:
            for row in view.rows:
                line = ttk.Frame(self.cart_items_container)
                line.pack(fill="x", pady=2)
                ttk.Label(line, text=row.text).pack(side="left")
                ttk.Button(
                    line,
                    text=row.button_text,
                    command=lambda pid=row.product_id: self.store.remove_from_cart(pid)
                ).pack(side="right")

        self.cart_total_label.config(text=view.total_text)
        self.logger.info("GUI: refreshed cart view")

    def show_notification(self, message: str, visible: bool):
        if visible:
            self.notification_label.config(text=message)
            self.notification_label.pack(side="bottom", fill="x")
        else:
            self.notification_label.pack_forget()

    # ACTIONS

    def gui_checkout(self):
        order = self.store.checkout()
        if order is not None:
            self.logger.info(f"GUI: order {order.order_id} placed, total={order.total}")


def main():
    root = tk.Tk()
    app = StorefrontApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
