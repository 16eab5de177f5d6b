import pytest

from builders import create_sample_file


@pytest.fixture
def sample_file() -> bytes:
    """A canonical level file with one chunk of every kind"""
    return create_sample_file()
