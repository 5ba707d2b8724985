"""Shared test fixtures for paginate tests."""
import pytest

from paginate import Pages


@pytest.fixture
def odd_pages():
    """5 items, 2 per page: two full pages and one partial."""
    return Pages(5, 2)


@pytest.fixture
def hundred_pages():
    return Pages(100, 5)


@pytest.fixture
def sample_items():
    return [f"item-{i}" for i in range(5)]
