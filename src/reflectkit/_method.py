"""Method invocation, plus the typed entry points built on it."""

__all__ = [
    "invoke_method",
    "instance_method",
    "static_method",
    "declared_instance_method",
    "declared_static_method",
]

from ._access import check_accessible, set_accessible
from ._error import IllegalArgument
from ._field import cast, check_receiver
from ._handle import Visibility
from ._resolve import get_declared_method, get_method


def check_arguments(handle, args, kwargs):
    """Check arguments against the parameters of an executable handle.

    Only arity and keyword names are checked, by binding. Argument types
    are left to the member itself.

    Raises:
        IllegalArgument: On the first mismatch
    """
    sig = handle.parameters
    if sig is None:
        return
    try:
        sig.bind(*args, **kwargs)
    except TypeError as e:
        raise IllegalArgument(
            f"Bad arguments for {handle.owner.__qualname__}.{handle.attr}: {e}"
        ) from e


def invoke_method(handle, receiver=None, *args, expect=None, **kwargs):
    """Invoke a resolved method and return its result.

    Instance methods dispatch through the receiver, so an override in the
    receiver's class runs. Private methods cannot be overridden and always
    run the resolved member. Classmethods bind to the class the lookup was
    made on and static methods ignore the receiver.
    Anything the method raises propagates unchanged.

    Args:
        handle: (MethodHandle) Resolved method
        receiver: Instance to invoke on, None for static methods
        *args: Positional arguments
        expect: (type | None) Type the caller expects back
        **kwargs: Keyword arguments

    Raises:
        IllegalAccess: If the handle is not accessible
        IllegalArgument: If receiver or arguments do not fit
        CastError: If the result does not match expect
    """
    check_accessible(handle)
    if handle.is_static:
        target = handle.member.__get__(None, handle.origin)
    else:
        check_receiver(handle, receiver)
        if handle.visibility is Visibility.PRIVATE:
            target = handle.member.__get__(receiver, type(receiver))
        else:
            target = getattr(receiver, handle.attr)
    check_arguments(handle, args, kwargs)
    return cast(target(*args, **kwargs), expect)


def instance_method(cls, name, obj, param_types, *args, expect=None, **kwargs):
    """Invoke an inherited public instance method of cls on obj."""
    handle = set_accessible(get_method(cls, name, param_types))
    return invoke_method(handle, obj, *args, expect=expect, **kwargs)


def static_method(cls, name, param_types, *args, expect=None, **kwargs):
    """Invoke an inherited public static or class method of cls."""
    handle = set_accessible(get_method(cls, name, param_types))
    return invoke_method(handle, None, *args, expect=expect, **kwargs)


def declared_instance_method(cls, name, obj, param_types, *args, expect=None, **kwargs):
    """Invoke an instance method declared on cls itself, at any visibility."""
    handle = set_accessible(get_declared_method(cls, name, param_types))
    return invoke_method(handle, obj, *args, expect=expect, **kwargs)


def declared_static_method(cls, name, param_types, *args, expect=None, **kwargs):
    """Invoke a static or class method declared on cls itself."""
    handle = set_accessible(get_declared_method(cls, name, param_types))
    return invoke_method(handle, None, *args, expect=expect, **kwargs)
