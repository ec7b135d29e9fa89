"""Shared fixtures for tests."""

import pytest

from simple_enum import declare_enum


@pytest.fixture
def make_host():
    """Return a factory for fresh host classes.

    Every test gets its own classes so declarations never leak between tests.
    """

    def factory(name: str = "User", **fields):
        namespace = {"__init__": _init_fields(fields)}
        return type(name, (), namespace)

    return factory


@pytest.fixture
def user_class(make_host):
    """Return a host with ``gender`` declared as {female: 1, male: 0}."""
    cls = make_host("User", gender_cd=None)
    declare_enum(cls, "gender", {"female": 1, "male": 0})
    return cls


def _init_fields(fields: dict):
    def __init__(self, **values):
        for name, default in fields.items():
            setattr(self, name, values.get(name, default))

    return __init__
