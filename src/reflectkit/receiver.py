"""Entry points that start from a value instead of a class.

Each function mirrors the top level function of the same name, using
``type(value)`` as the class and, for instance members, the value itself
as the default receiver.

Example:
    from reflectkit import receiver

    receiver.declared_instance_field(account, "__balance")
    receiver.instance_method(account, "deposit", None, (int,), 10)
"""

__all__ = [
    "instance_field",
    "static_field",
    "declared_instance_field",
    "declared_static_field",
    "instance_method",
    "static_method",
    "declared_instance_method",
    "declared_static_method",
    "constructor",
    "declared_constructor",
]

from . import _constructor, _field, _method


def instance_field(value, name, obj=None, expect=None):
    return _field.instance_field(type(value), name, value if obj is None else obj, expect)


def static_field(value, name, expect=None):
    return _field.static_field(type(value), name, expect)


def declared_instance_field(value, name, obj=None, expect=None):
    return _field.declared_instance_field(
        type(value), name, value if obj is None else obj, expect
    )


def declared_static_field(value, name, expect=None):
    return _field.declared_static_field(type(value), name, expect)


def instance_method(value, name, obj, param_types, *args, expect=None, **kwargs):
    """Invoke an inherited public method of type(value); obj None means value."""
    return _method.instance_method(
        type(value), name, value if obj is None else obj, param_types,
        *args, expect=expect, **kwargs
    )


def static_method(value, name, param_types, *args, expect=None, **kwargs):
    return _method.static_method(
        type(value), name, param_types, *args, expect=expect, **kwargs
    )


def declared_instance_method(value, name, obj, param_types, *args, expect=None, **kwargs):
    """Invoke a method declared on type(value); obj None means value."""
    return _method.declared_instance_method(
        type(value), name, value if obj is None else obj, param_types,
        *args, expect=expect, **kwargs
    )


def declared_static_method(value, name, param_types, *args, expect=None, **kwargs):
    return _method.declared_static_method(
        type(value), name, param_types, *args, expect=expect, **kwargs
    )


def constructor(value, param_types=(), *args, expect=None, **kwargs):
    """Build another instance of type(value)."""
    return _constructor.constructor(
        type(value), param_types, *args, expect=expect, **kwargs
    )


def declared_constructor(value, param_types=(), *args, expect=None, **kwargs):
    return _constructor.declared_constructor(
        type(value), param_types, *args, expect=expect, **kwargs
    )
