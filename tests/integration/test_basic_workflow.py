"""Basic workflow integration tests."""

import sys

sys.path.insert(0, "src")

from objectdecorator import Record, Specification, decorate


def test_mixin_pipeline():
    """Defaults, user values and fixed keys combine in one chain."""
    defaults = {"theme": "light", "pageSize": 20, "beta": False}
    user = {"theme": None, "pageSize": 50}

    decorate(user).augment(defaults).override({"beta": True, "unknown": 1})

    assert user == {"theme": "light", "pageSize": 50, "beta": True}


def test_duck_typing_between_decorated_objects():
    """Shapes compare by keys and kinds, not by values."""
    employee = {"id": "jsmith", "age": 32, "endDate": None}
    candidate = {"id": "pjones", "age": 45, "endDate": 1704067200000}

    spec = decorate(employee).get_spec()

    assert spec.like(candidate)
    assert spec.equals(candidate)
    assert not spec.equals({**candidate, "extra": "x"})


def test_record_prototype_workflow():
    """Records inherit behaviour and hold constants alongside own data."""
    base = Record({"describe": lambda: "employee", "company": "ACME"})
    employee = Record({"id": "jsmith"}, prototype=base)
    decorator = decorate(employee).constant("kind", "staff")

    assert decorator.get_prototype() is base
    assert decorator.contains("ACME")
    assert decorator.values() == ["jsmith", "staff"]

    snapshot = decorator.copy()
    snapshot.add("id", "pjones").add("KIND", "contractor")

    assert employee["id"] == "jsmith"
    assert employee["KIND"] == "staff"
    assert snapshot.component["KIND"] == "contractor"
    assert snapshot.component["company"] == "ACME"


def test_set_operations_round_out_a_diff():
    """Difference and intersection split two versions of an object."""
    old = {"id": 3, "name": "John", "email": "j@example.com"}
    new = {"id": 3, "name": "Johnny", "phone": "555"}

    changes = decorate(old).difference(new)
    unchanged = decorate(old).intersection(new)

    assert changes == {"name": "Johnny", "email": "j@example.com", "phone": "555"}
    assert unchanged == {"id": 3}
    assert Specification(unchanged).like(new)
