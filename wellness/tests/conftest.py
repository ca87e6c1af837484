import pytest

from fake_service import FakeService


@pytest.fixture
def service():
    return FakeService()
