"""Constructor invocation, plus the typed entry points built on it."""

__all__ = [
    "invoke_constructor",
    "constructor",
    "declared_constructor",
]

from ._access import check_accessible, set_accessible
from ._error import IllegalArgument
from ._field import cast
from ._method import check_arguments
from ._resolve import get_constructor, get_declared_constructor


def invoke_constructor(handle, *args, expect=None, **kwargs):
    """Build a new instance of the class the constructor was resolved on.

    Instances are created by calling the class, so ``__new__`` and
    ``__init__`` both run as they normally would. Anything they raise
    propagates unchanged.

    Raises:
        IllegalAccess: If the handle is not accessible
        IllegalArgument: If the arguments do not fit the signature
        CastError: If the instance does not match expect
    """
    check_accessible(handle)
    if handle.is_implicit and (args or kwargs):
        raise IllegalArgument(
            f"Default constructor of {handle.origin.__qualname__} takes no arguments"
        )
    check_arguments(handle, args, kwargs)
    return cast(handle.origin(*args, **kwargs), expect)


def constructor(cls, param_types=(), *args, expect=None, **kwargs):
    """Construct cls through the constructor it would normally run."""
    handle = set_accessible(get_constructor(cls, param_types))
    return invoke_constructor(handle, *args, expect=expect, **kwargs)


def declared_constructor(cls, param_types=(), *args, expect=None, **kwargs):
    """Construct cls through a constructor defined on cls itself."""
    handle = set_accessible(get_declared_constructor(cls, param_types))
    return invoke_constructor(handle, *args, expect=expect, **kwargs)
