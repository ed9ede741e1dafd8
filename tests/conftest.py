import pytest

from id_allocator import IdAllocator
from random_source import RandomSource


@pytest.fixture
def source():
    return RandomSource(seed=1234)


@pytest.fixture
def allocator():
    return IdAllocator()
