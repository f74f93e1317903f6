"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objectdecorator import DecoratorSettings


@pytest.fixture
def cdata():
    """Fresh employee record with one None entry, in a fixed key order."""
    return {
        "id": "jsmith",
        "number": "34079",
        "age": 32,
        "startDate": 1704067200000,
        "endDate": None,
        "active": True,
        "ssn": "444-00-2222",
        "title": "Software Developer",
    }


@pytest.fixture
def mixin():
    """Source mapping used by the mixin operations."""
    return {
        "id": "mixin",
        "bgColor": "red",
        "rank": "99%",
        "active": True,
        "getAge": lambda: 23,
        "execute": lambda: "Hello!",
    }


@pytest.fixture
def target():
    """Component with a falsy value, a None value and a callable."""
    return {
        "id": "test",
        "active": False,
        "bgColor": None,
        "getAge": lambda: 21,
    }


@pytest.fixture
def settings():
    """Explicit settings, independent of the environment."""
    return DecoratorSettings()
