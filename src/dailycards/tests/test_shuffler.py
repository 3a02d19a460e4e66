"""Tests for the seeded shuffler."""
from collections import Counter

import pytest
from faker import Faker

from dailycards.services.shuffler import deck_seed_key, seed_from_key, seeded_shuffle

fake = Faker()


def test_seed_from_key_sums_char_codes() -> None:
    """Test that the seed is the sum of character codes."""
    assert seed_from_key("ab") == 195
    assert seed_from_key("") == 0


def test_known_order() -> None:
    """Test a hand-computed ordering."""
    assert seeded_shuffle(["a", "b", "c"], "a") == ["c", "b", "a"]
    assert seeded_shuffle(["a", "b", "c"], "ab") == ["a", "b", "c"]


def test_same_key_same_order() -> None:
    """Test that shuffling is reproducible."""
    items = [f"card-{i}" for i in range(30)]
    first = seeded_shuffle(items, "p1-2024-01-01")
    second = seeded_shuffle(items, "p1-2024-01-01")
    assert first == second


def test_different_days_give_different_orders() -> None:
    """Test that the date changes the order."""
    items = [f"card-{i}" for i in range(20)]
    assert seeded_shuffle(items, "p1-2024-01-01") != seeded_shuffle(items, "p1-2024-01-02")


def test_different_profiles_give_different_orders() -> None:
    """Test that the profile id changes the order."""
    items = [f"card-{i}" for i in range(20)]
    assert (
        seeded_shuffle(items, deck_seed_key("profile-aaa", "2024-01-01"))
        != seeded_shuffle(items, deck_seed_key("profile-zzz", "2024-01-01"))
    )


@pytest.mark.parametrize("size", [1, 2, 5, 50])
def test_output_is_permutation(size: int) -> None:
    """Test that the output keeps every element exactly once."""
    items = [fake.word() for _ in range(size)]
    result = seeded_shuffle(items, fake.uuid4())
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


def test_input_not_mutated() -> None:
    """Test that the input sequence is left alone."""
    items = [1, 2, 3, 4, 5]
    seeded_shuffle(items, "p1-2024-01-01")
    assert items == [1, 2, 3, 4, 5]


def test_edge_cases() -> None:
    """Test empty and single-element inputs."""
    assert seeded_shuffle([], "anything") == []
    assert seeded_shuffle(["only"], "anything") == ["only"]


def test_deck_seed_key() -> None:
    """Test the profile/date key format."""
    assert deck_seed_key("p1", "2024-01-01") == "p1-2024-01-01"
