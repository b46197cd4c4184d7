"""Tests for forcing handles accessible."""

import sys

import pytest

import reflectkit
import reflecttest
from reflecttest import Account

# Audit hooks cannot be removed, so this one is switched by a flag.
_deny = []


def _sandbox_hook(event, args):
    if event == reflectkit.AUDIT_EVENT and _deny:
        raise RuntimeError(f"sandboxed: {args[1]}")


sys.addaudithook(_sandbox_hook)


def test_public_handles_start_accessible():
    assert reflectkit.get_field(Account, "owner").accessible
    assert reflectkit.get_constructor(Account, (str, int)).accessible


def test_non_public_handle_needs_access():
    """Reading a private field without set_accessible is refused."""
    acct = reflecttest.account()
    handle = reflectkit.get_declared_field(Account, "__balance")
    with pytest.raises(reflectkit.IllegalAccess):
        reflectkit.read_field(handle, acct)

    assert reflectkit.set_accessible(handle) is handle
    assert reflectkit.read_field(handle, acct) == 10


def test_set_accessible_is_idempotent():
    handle = reflectkit.get_declared_method(Account, "__audit", ())
    reflectkit.set_accessible(handle)
    reflectkit.set_accessible(handle)
    assert handle.accessible
    assert reflectkit.invoke_method(handle, reflecttest.account()) == "ann:10"


def test_set_accessible_false():
    handle = reflectkit.set_accessible(reflectkit.get_declared_method(Account, "__audit", ()))
    reflectkit.set_accessible(handle, False)
    with pytest.raises(reflectkit.IllegalAccess):
        reflectkit.invoke_method(handle, reflecttest.account())


def test_access_only_affects_the_handle():
    """Later resolutions start over from the member's visibility."""
    reflectkit.set_accessible(reflectkit.get_declared_field(Account, "__balance"))
    assert not reflectkit.get_declared_field(Account, "__balance").accessible


def test_audit_hook_can_deny():
    handle = reflectkit.get_declared_field(Account, "__balance")
    _deny.append(True)
    try:
        with pytest.raises(reflectkit.AccessDenied) as exc:
            reflectkit.set_accessible(handle)
        with pytest.raises(PermissionError):
            reflectkit.declared_instance_field(Account, "__balance", reflecttest.account())
    finally:
        _deny.clear()

    assert isinstance(exc.value.__cause__, RuntimeError)
    assert not handle.accessible
    assert reflectkit.set_accessible(handle).accessible
