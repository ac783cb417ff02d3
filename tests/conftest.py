import pytest

from user_directory_api.app.core.store import init_store


@pytest.fixture(autouse=True)
def seeded_store():
    """Give every test a fresh store holding the three sample users."""
    return init_store(seed=True)
