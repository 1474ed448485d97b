"""Unit tests for the identifier registry."""

import threading

import pytest

from dualformat.core.identifiers import ID_FLOOR, IdentifierRegistry, get_registry


class TestIdentifierRegistry:
    """Test string to integer identifier mapping."""

    def setup_method(self):
        """Create a fresh registry before each test."""
        self.registry = IdentifierRegistry()

    def test_first_id_is_floor(self):
        """Test that allocation starts at the floor."""
        assert self.registry.lookup_or_assign("60a1f2") == ID_FLOOR
        assert ID_FLOOR == 1_000_001

    def test_same_string_same_integer(self):
        """Test that a string keeps its integer."""
        first = self.registry.lookup_or_assign("abc")
        self.registry.lookup_or_assign("def")
        assert self.registry.lookup_or_assign("abc") == first
        assert len(self.registry) == 2

    def test_distinct_strings_distinct_integers(self):
        """Test that different strings never share an integer."""
        ids = [self.registry.lookup_or_assign(f"id-{i}") for i in range(50)]
        assert len(set(ids)) == 50
        assert ids == list(range(ID_FLOOR, ID_FLOOR + 50))

    def test_reverse_lookup(self):
        """Test mapping an integer back to its string."""
        value = self.registry.lookup_or_assign("5f3e")
        assert self.registry.reverse_lookup(value) == "5f3e"
        assert "5f3e" in self.registry

    def test_reverse_lookup_unknown(self):
        """Test that unknown integers give None."""
        assert self.registry.reverse_lookup(42) is None
        assert self.registry.reverse_lookup(ID_FLOOR) is None

    def test_custom_start(self):
        """Test starting above the floor."""
        registry = IdentifierRegistry(start=2_000_000)
        assert registry.lookup_or_assign("x") == 2_000_000

    def test_start_below_floor_rejected(self):
        """Test that the legacy range cannot be used."""
        with pytest.raises(ValueError, match="start must be at least"):
            IdentifierRegistry(start=1000)

    def test_concurrent_assignment(self):
        """Test that concurrent callers agree on every mapping."""
        results: list[dict[str, int]] = []

        def worker():
            results.append(
                {f"id-{i}": self.registry.lookup_or_assign(f"id-{i}") for i in range(200)}
            )

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(r == results[0] for r in results)
        assert len(set(results[0].values())) == 200


class TestDefaultRegistry:
    """Test the process-wide registry."""

    def test_get_registry_is_shared(self):
        """Test that the same instance is returned every time."""
        assert get_registry() is get_registry()
        assert isinstance(get_registry(), IdentifierRegistry)
