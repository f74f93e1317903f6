"""Tests for constant() and copy() of locked entries."""

import pytest

from objectdecorator import DecoratorSettings, InvalidConstantError, Record, decorate


@pytest.fixture
def record():
    return Record({"id": "jsmith"})


def test_constant_is_upper_cased_and_locked(record):
    """CRITICAL: A constant cannot be changed or removed once installed.

    Why: Callers rely on constants staying fixed for the component's lifetime.
    """
    decorate(record).constant("name", "X")

    assert record["NAME"] == "X"
    record["NAME"] = "Y"
    assert record["NAME"] == "X"
    del record["NAME"]
    assert "NAME" in record


def test_constant_ignores_decorator_mutations(record):
    decorator = decorate(record).constant("name", "X")

    decorator.add("NAME", "Y").extend({"NAME": "Z"}).override({"NAME": "W"})

    assert decorator.remove("NAME") == "X"
    assert record["NAME"] == "X"


def test_constant_is_enumerable(record):
    decorator = decorate(record).constant("max_age", 99)

    assert decorator.values() == ["jsmith", 99]
    assert decorator.size() == 2
    assert decorator.has("MAX_AGE")


@pytest.mark.parametrize("value", ["text", 0, 1.5, True, False, None])
def test_constant_accepts_primitives(record, value):
    decorate(record).constant("flag", value)
    assert record["FLAG"] is value


@pytest.mark.parametrize("value", [{}, [], ("a",), lambda: 1, Record()])
def test_constant_rejects_composite_values(record, value):
    with pytest.raises(InvalidConstantError, match="A constant must be a string or a primitive"):
        decorate(record).constant("name", value)
    assert "NAME" not in record


def test_invalid_constant_error_carries_key_and_value(record):
    with pytest.raises(InvalidConstantError) as excinfo:
        decorate(record).constant("name", {"a": 1})

    assert excinfo.value.key == "name"
    assert excinfo.value.value == {"a": 1}
    assert "name:{'a': 1}" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_constant_requires_lockable_component():
    """Plain mappings cannot honour write locks, so they are rejected."""
    with pytest.raises(TypeError, match="cannot hold constants"):
        decorate({}).constant("name", "X")


def test_value_checked_before_component():
    with pytest.raises(InvalidConstantError):
        decorate({}).constant("name", [])


@pytest.mark.parametrize(
    ("case", "expected"),
    [("upper", "MAX_AGE"), ("lower", "max_age"), ("preserve", "Max_Age")],
)
def test_constant_key_case_setting(record, case, expected):
    settings = DecoratorSettings(constant_key_case=case)

    decorate(record, settings).constant("Max_Age", 99)

    assert record[expected] == 99
    assert record.is_locked(expected)


def test_copy_unlocks_constants_by_default(record, settings):
    decorate(record, settings).constant("name", "X")

    duplicate = decorate(record, settings).copy().add("NAME", "Y")

    assert duplicate.component["NAME"] == "Y"
    assert record["NAME"] == "X"


def test_copy_can_keep_constants(record):
    settings = DecoratorSettings(copy_constants=True)
    decorate(record, settings).constant("name", "X")

    duplicate = decorate(record, settings).copy().add("NAME", "Y")

    assert duplicate.component["NAME"] == "X"
    assert duplicate.component.is_locked("NAME")
    assert not duplicate.component.is_locked("id")
