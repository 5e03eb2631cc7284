"""Tests for the catalog read-through cache."""

import pytest

from storefront.infrastructure.persistence.cached_product_repository import (
    CachedProductRepository,
)
from tests.fakes import FakeProductRepository, make_product


class CountingRepository(FakeProductRepository):

    def __init__(self, products=None) -> None:
        super().__init__(products)
        self.list_calls = 0

    def list_all(self):
        self.list_calls += 1
        return super().list_all()


class FakeClock:

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _cached(window: float = 60):
    inner = CountingRepository([make_product(id="1")])
    clock = FakeClock()
    return CachedProductRepository(inner, revalidate_seconds=window, clock=clock), inner, clock


class TestCachedProductRepository:

    def test_reads_within_window_hit_the_snapshot(self):
        repo, inner, clock = _cached()
        repo.list_all()
        clock.now += 59
        repo.list_all()
        assert repo.get_by_id("1") is not None
        assert repo.get_by_name("aviator classic") is not None
        assert inner.list_calls == 1

    def test_snapshot_expires_after_window(self):
        repo, inner, clock = _cached()
        repo.list_all()
        clock.now += 60
        repo.list_all()
        assert inner.list_calls == 2

    def test_out_of_band_writes_are_stale_until_expiry(self):
        repo, inner, clock = _cached()
        repo.list_all()
        inner.save(make_product(id="2", name="Muse"))
        assert repo.get_by_id("2") is None
        clock.now += 61
        assert repo.get_by_id("2") is not None

    def test_writes_through_the_cache_invalidate(self):
        repo, inner, _ = _cached()
        repo.list_all()
        repo.save(make_product(id="2", name="Muse"))
        assert {p.id for p in repo.list_all()} == {"1", "2"}
        assert repo.delete("2") is True
        assert [p.id for p in repo.list_all()] == ["1"]
        assert inner.list_calls == 3

    def test_zero_window_disables_caching(self):
        repo, inner, _ = _cached(window=0)
        repo.list_all()
        repo.list_all()
        assert repo.get_by_id("1") is not None
        assert inner.list_calls == 3


class UnreadableRepository(FakeProductRepository):

    def list_all(self):
        raise OSError("products.json: permission denied")


SEED = [make_product(id="1", name="Aviator Classic"), make_product(id="2", name="Wayfarer Bold")]


class TestFallbackCatalog:

    def test_empty_store_serves_fallback(self):
        repo = CachedProductRepository(FakeProductRepository(), revalidate_seconds=60, fallback=SEED)
        assert [p.id for p in repo.list_all()] == ["1", "2"]
        assert repo.get_by_name("wayfarer bold").id == "2"

    def test_real_products_replace_fallback(self):
        repo = CachedProductRepository(FakeProductRepository(), revalidate_seconds=60, fallback=SEED)
        repo.list_all()
        repo.save(make_product(id="1", name="Round Titanium"))
        assert [p.name for p in repo.list_all()] == ["Round Titanium"]

    def test_unreadable_store_serves_fallback(self):
        repo = CachedProductRepository(UnreadableRepository(), revalidate_seconds=0, fallback=SEED)
        assert repo.get_by_id("2") is not None

    def test_unreadable_store_without_fallback_raises(self):
        repo = CachedProductRepository(UnreadableRepository(), revalidate_seconds=60)
        with pytest.raises(OSError):
            repo.list_all()

    def test_without_fallback_empty_store_is_empty(self):
        repo = CachedProductRepository(FakeProductRepository(), revalidate_seconds=60)
        assert repo.list_all() == []
