"""Tests for the product model and catalogue."""

import pytest

from models.product import DEFAULT_PRODUCTS, Catalogue, Product


class TestProduct:
    def test_product_is_immutable(self):
        p = Product(id=1, name="Smartphone", description="", price=699.99)
        with pytest.raises(AttributeError):
            p.price = 1.0

    @pytest.mark.parametrize("bad_id", [0, -3, "1", True])
    def test_rejects_non_positive_or_non_int_id(self, bad_id):
        with pytest.raises(ValueError):
            Product(id=bad_id, name="x", description="", price=1.0)

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError):
            Product(id=1, name="x", description="", price=-0.01)

    @pytest.mark.parametrize("bad_price", [float("nan"), float("inf")])
    def test_rejects_non_finite_price(self, bad_price):
        with pytest.raises(ValueError):
            Product(id=1, name="x", description="", price=bad_price)

    def test_rejects_non_string_image(self):
        with pytest.raises(ValueError):
            Product(id=1, name="x", description="", price=1.0, image=None)

    def test_zero_price_allowed(self):
        assert Product(id=1, name="Free", description="", price=0).price == 0


class TestCatalogue:
    def test_default_catalogue_order(self, catalogue):
        assert [p.name for p in catalogue] == ["Smartphone", "Headphones", "Laptop"]
        assert len(catalogue) == 3

    def test_lookup_by_id(self, catalogue):
        assert catalogue.get(2).name == "Headphones"
        assert catalogue.get(3).price == 1299.99

    def test_unknown_id_returns_none(self, catalogue):
        """Lookup of a missing id is not an error."""
        assert catalogue.get(99) is None
        assert 99 not in catalogue
        assert 1 in catalogue

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Catalogue([DEFAULT_PRODUCTS[0], DEFAULT_PRODUCTS[0]])

    def test_products_is_read_only_sequence(self, catalogue):
        assert isinstance(catalogue.products, tuple)
