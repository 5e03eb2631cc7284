"""Tests for the catalog use cases, using in-memory fake repositories."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import ProductType
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog_search import ProductFilter
from storefront.infrastructure.seed_data import SEED_PRODUCTS
from tests.fakes import FakeProductRepository, FakeReviewRepository, make_lens, make_product


def _add(handler: AddProductHandler, name: str = "Round Titanium", **overrides):
    fields = dict(
        name=name,
        description="Featherweight round frame",
        price="3499.00",
        brand="Lindberg",
        product_type="frames",
        image_id="frame-round",
    )
    fields.update(overrides)
    return handler.handle(**fields)


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        repo = FakeProductRepository([make_product(id="4")])
        handler = AddProductHandler(repo)
        assert _add(handler).id == "5"
        assert _add(handler, name="Cat Eye Muse").id == "6"

    def test_first_product_gets_id_one(self):
        product = _add(AddProductHandler(FakeProductRepository()))
        assert product.id == "1"
        assert product.type is ProductType.FRAMES
        assert product.created_at is not None

    def test_optional_fields_are_stored(self):
        repo = FakeProductRepository()
        product = _add(AddProductHandler(repo), gender="Unisex", attributes={"frameShape": "Round"})
        assert repo.get_by_id(product.id).attributes == {"frameShape": "Round"}

    def test_duplicate_name_rejected(self):
        repo = FakeProductRepository([make_product(name="Round Titanium")])
        with pytest.raises(ValidationError, match="already exists"):
            _add(AddProductHandler(repo), name=" round titanium ")

    def test_uses_configured_currency(self):
        product = _add(AddProductHandler(FakeProductRepository(), currency="USD"))
        assert product.price == Money.of("3499", "USD")


class TestUpdateProduct:

    def test_price_and_details(self):
        repo = FakeProductRepository([make_product(id="1")])
        product = UpdateProductHandler(repo).handle("1", new_price="2999", brand=" Oakley ", type="sunglasses")
        assert product.price == Money.of("2999")
        assert product.brand == "Oakley"
        assert product.type is ProductType.SUNGLASSES

    def test_none_values_are_ignored(self):
        repo = FakeProductRepository([make_product(id="1", name="Aviator Classic")])
        UpdateProductHandler(repo).handle("1", new_price="100", name=None)
        assert repo.get_by_id("1").name == "Aviator Classic"

    def test_nothing_to_update(self):
        repo = FakeProductRepository([make_product(id="1")])
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(repo).handle("1", name=None)

    def test_price_can_drop_to_zero(self):
        repo = FakeProductRepository([make_lens(id="1")])
        product = UpdateProductHandler(repo).handle("1", new_price="0")
        assert product.price == Money.of("0")
        assert repo.get_by_id("1").price.amount == 0

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(FakeProductRepository()).handle("9", new_price="10")


class TestDeleteProduct:

    def test_deletes(self):
        repo = FakeProductRepository([make_product(id="1")])
        DeleteProductHandler(repo).handle("1")
        assert repo.get_by_id("1") is None

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="'1' not found"):
            DeleteProductHandler(FakeProductRepository()).handle("1")


class TestListAndShow:

    def test_list_with_filter(self):
        repo = FakeProductRepository([
            make_product(id="1", brand="Ray-Ban"),
            make_product(id="2", name="Muse", brand="Vogue"),
        ])
        handler = ListProductsHandler(repo)
        assert [p.id for p in handler.handle(ProductFilter(brands=("Vogue",)))] == ["2"]
        assert [p.id for p in handler.handle()] == ["1", "2"]
        assert handler.brands() == ["Ray-Ban", "Vogue"]

    def test_show_frame_includes_rating_and_lenses(self):
        products = FakeProductRepository([make_product(id="1"), make_lens(id="L1")])
        reviews = FakeReviewRepository()
        reviews.save(Review.create("1", "u1", "Alice", 5, "Lovely frames."))
        reviews.save(Review.create("1", "u2", "Bob", 4, "Comfortable all day."))

        detail = ShowProductHandler(products, reviews).handle("1")

        assert detail.product.price == "₹2000.00"
        assert detail.review_count == 2
        assert detail.average_rating == "4.5"
        assert [lens.id for lens in detail.lens_options] == ["L1"]

    def test_show_frame_offers_only_listed_lenses(self):
        products = FakeProductRepository([
            make_product(id="1"),
            make_lens(id="L1"),
            make_lens(id="L2", name="Technoii Drive Lens", price="1499"),
        ])
        handler = ShowProductHandler(
            products, FakeReviewRepository(), offered_lenses=["Technoii Drive Lens"]
        )
        assert [lens.id for lens in handler.handle("1").lens_options] == ["L2"]

    def test_show_contact_lenses_has_no_lens_options(self):
        products = FakeProductRepository([
            make_product(id="1", type=ProductType.CONTACT_LENSES),
            make_lens(id="L1"),
        ])
        detail = ShowProductHandler(products, FakeReviewRepository()).handle("1")
        assert detail.lens_options == []
        assert detail.average_rating is None


class TestSeedCatalog:

    def test_seeds_empty_catalog(self):
        repo = FakeProductRepository()
        inserted = SeedCatalogHandler(repo, "INR").handle(SEED_PRODUCTS)
        assert inserted == len(SEED_PRODUCTS)
        assert len(repo.list_all()) == len(SEED_PRODUCTS)
        assert any(p.is_lens for p in repo.list_all())

    def test_skips_populated_catalog(self):
        repo = FakeProductRepository([make_product()])
        assert SeedCatalogHandler(repo, "INR").handle(SEED_PRODUCTS) == 0
        assert len(repo.list_all()) == 1
