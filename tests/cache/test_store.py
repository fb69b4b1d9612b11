"""
Тесты CacheStore: TTL, счётчик попаданий, вытеснение, очистка.
"""
import pytest

from catalog_gateway.cache.store import CacheStore


class TestGetSet:
    """get/set/has/delete."""

    def test_get_after_set_returns_value_and_counts_hit(self, store):
        """set + get возвращает значение, hits 0 -> 1."""
        store.set("k", {"id": 1}, ttl=60)
        assert store.stats().entries[0].hits == 0

        assert store.get("k") == {"id": 1}
        assert store.stats().entries[0].hits == 1

    def test_get_missing_key_returns_none(self, store):
        """Промах не ошибка: None."""
        assert store.get("missing") is None

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_non_positive_ttl_is_immediately_expired(self, store, ttl):
        """ttl <= 0: запись сразу считается отсутствующей."""
        store.set("k", "v", ttl=ttl)
        assert store.get("k") is None
        assert store.has("k") is False
        assert len(store) == 0

    def test_default_ttl_used_when_omitted(self, store, clock):
        """Без ttl используется default_ttl."""
        store.set("k", "v")
        clock.advance(300)
        assert store.get("k") == "v"
        clock.advance(0.001)
        assert store.get("k") is None

    def test_expired_entry_removed_on_get(self, store, clock):
        """Просроченная запись удаляется лениво при чтении."""
        store.set("k", "v", ttl=10)
        clock.advance(10.5)
        assert store.get("k") is None
        assert len(store) == 0

    def test_has_does_not_count_hit(self, store):
        """has не увеличивает счётчик."""
        store.set("k", "v", ttl=60)
        assert store.has("k") is True
        assert store.stats().entries[0].hits == 0

    def test_has_removes_expired_entry(self, store, clock):
        store.set("k", "v", ttl=1)
        clock.advance(2)
        assert store.has("k") is False
        assert len(store) == 0

    def test_delete_is_idempotent(self, store):
        store.set("k", "v", ttl=60)
        assert store.delete("k") is True
        assert store.delete("k") is False
        assert store.get("k") is None

    def test_delete_prefix_removes_only_matching_keys(self, store):
        store.set("trending:8", [], ttl=60)
        store.set("trending:10", [], ttl=60)
        store.set("video:1", {}, ttl=60)
        assert store.delete_prefix("trending:") == 2
        assert store.has("video:1")

    def test_clear_removes_everything(self, store):
        store.set("a", 1, ttl=60)
        store.set("b", 2, ttl=60)
        store.clear()
        assert len(store) == 0


class TestEviction:
    """Вытеснение наименее используемых записей."""

    def test_least_hit_entry_evicted(self, clock):
        """capacity=2: a получает попадание, при вставке c вытесняется b."""
        store = CacheStore(capacity=2, clock=clock)
        store.set("a", 1, ttl=60)
        store.set("b", 2, ttl=60)
        store.get("a")

        store.set("c", 3, ttl=60)

        assert store.has("a")
        assert store.has("c")
        assert not store.has("b")
        assert len(store) == 2

    def test_tie_broken_by_insertion_order(self, clock):
        """При равных hits вытесняется самая ранняя запись."""
        store = CacheStore(capacity=3, clock=clock)
        for key in ("a", "b", "c"):
            store.set(key, key, ttl=60)
        store.set("d", "d", ttl=60)
        assert [e.key for e in store.stats().entries] == ["b", "c", "d"]

    def test_frequently_hit_old_entry_survives(self, clock):
        """LFU, не LRU: давно, но часто читаемая запись остаётся."""
        store = CacheStore(capacity=2, clock=clock)
        store.set("old", 1, ttl=600)
        for _ in range(5):
            store.get("old")
        clock.advance(100)
        store.set("recent", 2, ttl=600)
        store.get("recent")

        store.set("new", 3, ttl=600)

        assert store.has("old")
        assert not store.has("recent")

    def test_overwrite_at_capacity_does_not_evict_and_resets_hits(self, clock):
        """Перезапись не вызывает вытеснение и сбрасывает hits."""
        store = CacheStore(capacity=2, clock=clock)
        store.set("a", 1, ttl=60)
        store.set("b", 2, ttl=60)
        store.get("a")
        store.get("a")

        store.set("a", 10, ttl=60)

        assert len(store) == 2
        assert store.has("b")
        hits = {e.key: e.hits for e in store.stats().entries}
        assert hits["a"] == 0
        assert store.get("a") == 10

    def test_expired_entries_dropped_before_evicting_live_ones(self, clock):
        """При переполнении сначала удаляются просроченные записи."""
        store = CacheStore(capacity=2, clock=clock)
        store.set("short", 1, ttl=5)
        store.set("long", 2, ttl=600)
        store.get("short")
        clock.advance(10)

        store.set("new", 3, ttl=600)

        assert store.has("long")
        assert store.has("new")
        assert len(store) == 2

    def test_size_never_exceeds_capacity(self, clock):
        store = CacheStore(capacity=5, clock=clock)
        for i in range(50):
            store.set(f"k{i}", i, ttl=60)
            assert len(store) <= 5

    def test_invalid_capacity_rejected(self):
        with pytest.raises(ValueError):
            CacheStore(capacity=0)


class TestSweep:
    """sweep_expired и stats."""

    def test_sweep_removes_exactly_expired_entries(self, store, clock):
        """Удаляются только просроченные, hits остальных не меняются."""
        store.set("short", 1, ttl=10)
        store.set("long", 2, ttl=100)
        store.set("dead", 3, ttl=0)
        store.get("long")
        store.get("long")
        clock.advance(50)

        removed = store.sweep_expired()

        assert removed == 2
        stats = store.stats()
        assert [e.key for e in stats.entries] == ["long"]
        assert stats.entries[0].hits == 2

    def test_sweep_on_fresh_store_is_noop(self, store):
        store.set("k", "v", ttl=60)
        assert store.sweep_expired() == 0
        assert len(store) == 1

    def test_stats_reports_size_capacity_and_age(self, store, clock):
        store.set("k", "v", ttl=60)
        clock.advance(12)
        stats = store.stats()
        assert stats.size == 1
        assert stats.capacity == 100
        assert stats.entries[0].age == pytest.approx(12)
        assert stats.entries[0].ttl == 60
