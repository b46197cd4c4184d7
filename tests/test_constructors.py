"""Tests for constructing instances."""

import pytest

import reflectkit
from reflecttest import Account, Base, Child, Echo, Fragile, Pair, Plain, Point


def test_constructor_sets_fields():
    acct = reflectkit.constructor(Account, (str, int), "ann", 25)
    assert isinstance(acct, Account)
    assert reflectkit.instance_field(Account, "owner", acct) == "ann"
    assert reflectkit.declared_instance_field(Account, "__balance", acct) == 25


def test_declared_constructor_defaults():
    acct = reflectkit.declared_constructor(Account, (str, int), "ann")
    assert reflectkit.declared_instance_field(Account, "__balance", acct) == 0


def test_dataclass_constructor():
    pair = reflectkit.declared_constructor(Pair, (int, int), 1, 2)
    assert pair == Pair(1, 2)
    assert reflectkit.declared_instance_field(Pair, "right", pair) == 2


def test_inherited_constructor():
    """Inherited lookup uses the __init__ the class would run."""
    handle = reflectkit.get_constructor(Child, (str,))
    assert handle.owner is Base
    assert handle.origin is Child

    child = reflectkit.constructor(Child, (str,), "cy")
    assert type(child) is Child
    assert child.name == "cy"

    with pytest.raises(reflectkit.MemberNotFound):
        reflectkit.declared_constructor(Child, (str,), "cy")


def test_implicit_constructor():
    """A class with no constructor at all has an empty declared one."""
    handle = reflectkit.get_declared_constructor(Plain)
    assert handle.is_implicit
    assert handle.signature == ()
    assert isinstance(reflectkit.declared_constructor(Plain), Plain)
    assert isinstance(reflectkit.constructor(Plain), Plain)

    with pytest.raises(reflectkit.MemberNotFound):
        reflectkit.get_declared_constructor(Plain, (int,))
    with pytest.raises(reflectkit.IllegalArgument):
        reflectkit.declared_constructor(Plain, (), 1)


def test_signature_mismatch():
    with pytest.raises(reflectkit.MemberNotFound):
        reflectkit.constructor(Account, (str,), "ann")
    with pytest.raises(reflectkit.MemberNotFound):
        reflectkit.constructor(Account)


def test_argument_mismatch():
    """Only arity is checked, argument types go to the constructor as given."""
    assert reflectkit.constructor(Account, (str, int), 1, 2).owner == 1
    with pytest.raises(reflectkit.IllegalArgument):
        reflectkit.constructor(Account, (str, int))


def test_constructor_errors_propagate():
    assert isinstance(reflectkit.constructor(Fragile, (bool,), True), Fragile)
    with pytest.raises(ValueError, match="not ok"):
        reflectkit.constructor(Fragile, (bool,), False)


def test_builtin_constructor():
    assert reflectkit.constructor(dict, (tuple,), a=1) == {"a": 1}
    assert reflectkit.constructor(Account, (str, int), "ann", expect=Base).owner == "ann"
    with pytest.raises(reflectkit.CastError):
        reflectkit.constructor(Account, (str, int), "ann", expect=dict)


def test_unannotated_constructor():
    echo = reflectkit.constructor(Echo, (object,), 5)
    assert echo.value == 5
    assert reflectkit.declared_constructor(Echo, (object,), "five").value == "five"


def test_int_for_float_parameters():
    point = reflectkit.constructor(Point, (float, float), 1, 2)
    assert (point.x, point.y) == (1, 2)
