# data/repository.py
import json
from pathlib import Path

from models.product import DEFAULT_PRODUCTS, Catalogue, Product, PLACEHOLDER_IMAGE
from utils.logger import get_logger
from utils.settings import CATALOGUE_FILE, STORAGE_DIR

logger = get_logger("repository")


class CatalogueRepository:
    # Read-only source of the product catalogue. Nothing is ever written
    # back: the cart lives in memory for the session only.

    def __init__(self, storage_dir: Path | None = None):
        self.storage_dir = Path(storage_dir) if storage_dir is not None else STORAGE_DIR

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Missing, empty or unreadable file -> None, caller falls back to defaults
        path = self._file_path(filename)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None
        if text == "":
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupted {path}: {e}")
            return None

    def get_products(self) -> list[Product]:
        data = self._read_json(CATALOGUE_FILE)
        if data is None:
            return list(DEFAULT_PRODUCTS)
        if not isinstance(data, list):
            raise ValueError(f"{CATALOGUE_FILE} must contain a list of products.")
        return [self._product_from_dict(d) for d in data]

    def load_catalogue(self) -> Catalogue:
        catalogue = Catalogue(self.get_products())
        logger.info(f"Catalogue loaded with {len(catalogue)} products")
        return catalogue

    @staticmethod
    def _product_from_dict(d) -> Product:
        if not isinstance(d, dict):
            raise ValueError(f"Invalid product record: {d!r}")
        try:
            return Product(
                id=d["id"],
                name=str(d["name"]),
                description=str(d.get("description", "")),
                price=float(d["price"]),
                image=d.get("image") or PLACEHOLDER_IMAGE,
            )
        except KeyError as e:
            raise ValueError(f"Product record missing field {e}: {d!r}") from e
        except TypeError as e:
            raise ValueError(f"Invalid product record {d!r}: {e}") from e
