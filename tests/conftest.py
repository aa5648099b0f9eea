"""Pytest configuration and shared fixtures for safe-monads tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from safe_monads import maybe

    return maybe('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from safe_monads import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from safe_monads import ok

    return ok(42)


@pytest.fixture
def sample_fail():
    """Sample Fail value for testing."""
    from safe_monads import fail

    return fail(ValueError('test error'))


@pytest.fixture
def nested_data():
    """Nested mappings and lists for path lookups."""
    return {
        'a': {'b': {'c': 5}},
        'users': [{'name': 'User 1'}, {'name': 'User 2', 'email': None}],
        'flags': {'enabled': False, 'count': 0, 'label': ''},
    }


class FakeEnvReader:
    """EnvReader backed by a dict."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values
        self.reads: list[str] = []

    def read_env(self, key: str) -> str | None:
        self.reads.append(key)
        return self.values.get(key)


@pytest.fixture
def fake_env():
    """EnvReader with a few preset values."""
    return FakeEnvReader({'someKey': 'someVal', 'PORT': '8080'})
