"""Field reads, plus the typed entry points built on them."""

__all__ = [
    "read_field",
    "instance_field",
    "static_field",
    "declared_instance_field",
    "declared_static_field",
]

from ._access import check_accessible, set_accessible
from ._error import CastError, IllegalArgument
from ._resolve import get_declared_field, get_field


def cast(value, expect):
    """Check a result against the type the caller expects.

    There is no conversion, a mismatch raises CastError. None passes for
    any expected type.
    """
    if expect is None or value is None or isinstance(value, expect):
        return value
    raise CastError(value, expect)


def check_receiver(handle, receiver):
    if receiver is None:
        raise IllegalArgument(
            f"Instance {handle.kind.value} {handle.owner.__qualname__}.{handle.attr} "
            "requires a receiver"
        )
    if not isinstance(receiver, handle.owner):
        raise IllegalArgument(
            f"Receiver {type(receiver).__qualname__} is not an instance of "
            f"{handle.owner.__qualname__}"
        )


def read_field(handle, receiver=None, expect=None):
    """Read the current value of a field.

    Static fields are read from the class the lookup was made on and
    ignore the receiver. Instance fields are read from the receiver.

    Args:
        handle: (FieldHandle) Resolved field
        receiver: Instance to read from, None for static fields
        expect: (type | None) Type the caller expects back

    Returns:
        The field value

    Raises:
        IllegalAccess: If the handle is not accessible
        IllegalArgument: If an instance field gets no receiver, or a foreign one
        CastError: If the value does not match expect
    """
    check_accessible(handle)
    if handle.is_static:
        value = getattr(handle.origin, handle.attr)
    else:
        check_receiver(handle, receiver)
        value = getattr(receiver, handle.attr)
    return cast(value, expect)


def instance_field(cls, name, obj, expect=None):
    """Read an inherited public instance field of cls from obj."""
    return read_field(set_accessible(get_field(cls, name)), obj, expect)


def static_field(cls, name, expect=None):
    """Read an inherited public static field of cls."""
    return read_field(set_accessible(get_field(cls, name)), None, expect)


def declared_instance_field(cls, name, obj, expect=None):
    """Read an instance field declared on cls itself, at any visibility."""
    return read_field(set_accessible(get_declared_field(cls, name)), obj, expect)


def declared_static_field(cls, name, expect=None):
    """Read a static field declared on cls itself, at any visibility."""
    return read_field(set_accessible(get_declared_field(cls, name)), None, expect)
