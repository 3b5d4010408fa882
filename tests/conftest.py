import pytest

import app as greeter


@pytest.fixture()
def make_client():
    def _factory(config=None):
        return greeter.create_app(config).test_client()

    return _factory
