"""Tests for the user builder."""
import dataclasses

import pytest

from pattern_demos.domain.entities.user import User, UserBuilder


def test_build_with_every_field():
    user = (
        UserBuilder()
        .name("John Doe")
        .age(30)
        .email("john.doe@email.com")
        .active(True)
        .build()
    )

    assert user == User(name="John Doe", age=30, email="john.doe@email.com", active=True)
    assert str(user) == "John Doe, Age: 30, Email: john.doe@email.com, Active: True"


def test_setters_return_the_builder():
    builder = UserBuilder()

    assert builder.name("Jane") is builder
    assert builder.age(1) is builder
    assert builder.email("jane@email.com") is builder
    assert builder.active(False) is builder


def test_unset_fields_use_defaults():
    user = UserBuilder().name("Jane").build()

    assert user.name == "Jane"
    assert user.age == 0
    assert user.email is None
    assert user.active is False


def test_last_value_wins():
    user = UserBuilder().age(20).age(21).build()
    assert user.age == 21


def test_each_build_returns_a_new_user():
    builder = UserBuilder().name("John Doe")
    first = builder.build()
    second = builder.age(40).build()

    assert first.age == 0
    assert second.age == 40
    assert first is not second


def test_negative_age_is_rejected():
    with pytest.raises(ValueError, match="age must be non-negative"):
        UserBuilder().age(-1).build()


def test_user_is_immutable():
    user = UserBuilder().name("John Doe").build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Someone else"
