"""Tests for seeded highlight samples."""

from __future__ import annotations

from sceneplay.timeline.sampling import derive_seed, sample_indices


class TestSampleIndices:
    """Tests for sample_indices."""

    def test_reproducible_for_same_seed_and_key(self) -> None:
        a = sample_indices(7, "sampling/selected", 64, 32)
        b = sample_indices(7, "sampling/selected", 64, 32)
        assert a == b
        assert len(a) == 32

    def test_indices_within_population(self) -> None:
        picked = sample_indices(3, "k", 10, 10)
        assert picked == frozenset(range(10))

    def test_fraction_takes_floor(self) -> None:
        assert len(sample_indices(0, "k", 64, 32, fraction=0.5)) == 16
        assert len(sample_indices(0, "k", 64, 32, fraction=0.99)) == 31

    def test_growing_fraction_only_adds(self) -> None:
        previous = frozenset()
        for step in range(11):
            current = sample_indices(5, "k", 64, 32, fraction=step / 10)
            assert previous <= current
            previous = current

    def test_fraction_is_clamped(self) -> None:
        assert sample_indices(0, "k", 10, 4, fraction=-1.0) == frozenset()
        assert len(sample_indices(0, "k", 10, 4, fraction=3.0)) == 4

    def test_degenerate_sizes(self) -> None:
        assert sample_indices(0, "k", 0, 5) == frozenset()
        assert sample_indices(0, "k", 5, 0) == frozenset()

    def test_keys_are_independent(self) -> None:
        assert derive_seed(1, "a/x") != derive_seed(1, "b/x")
        assert derive_seed(1, "a/x") == derive_seed(1, "a/x")
