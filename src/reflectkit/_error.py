"""Error classes and helpers"""

__all__ = [
    "ReflectionError",
    "MemberNotFound",
    "IllegalArgument",
    "IllegalAccess",
    "AccessDenied",
    "CastError",
]


class ReflectionError(Exception):
    """Base class for errors raised by reflectkit itself.

    Errors raised by a reflected member while it runs are never wrapped
    in one of these, they propagate to the caller unchanged.
    """


class MemberNotFound(ReflectionError, AttributeError):
    """No member matches the name, kind and signature under a strategy.

    Args:
        owner: (type | str | None) Class the lookup was made on; for
            locate(), the dotted module path the class was looked for in
        name: (str) Requested member name
        kind: (Kind | None) Kind of member requested
        strategy: (Strategy | None) Lookup strategy used
        signature: (tuple | None) Signature requested for executables

    Attributes:
        owner, name, kind, strategy, signature: As given
    """

    def __init__(self, owner, name, kind=None, strategy=None, signature=None):
        self.owner = owner
        self.kind = kind
        self.strategy = strategy
        self.signature = signature
        super().__init__(self._describe(name))
        # Set after AttributeError.__init__, which resets name
        self.name = name

    def _describe(self, name):
        owner = getattr(self.owner, "__qualname__", repr(self.owner))
        what = self.kind.value if self.kind is not None else "member"
        text = f"No {what} {name!r} on {owner}"
        if self.signature is not None:
            sig = ", ".join(getattr(t, "__name__", str(t)) for t in self.signature)
            text += f" with signature ({sig})"
        if self.strategy is not None:
            text += f" ({self.strategy.value} lookup)"
        return text


class IllegalArgument(ReflectionError, TypeError):
    """Receiver or arguments do not fit the member being invoked."""


class IllegalAccess(ReflectionError):
    """A non-public member was used through a handle not made accessible."""


class AccessDenied(ReflectionError, PermissionError):
    """An audit hook refused to make a member accessible."""


class CastError(ReflectionError, TypeError):
    """Result is not an instance of the type the caller expected.

    Args:
        value: The value produced by the member
        expect: (type) The type the caller asked for
    """

    def __init__(self, value, expect):
        self.value = value
        self.expect = expect
        super().__init__(
            f"Cannot cast {type(value).__name__} to {getattr(expect, '__name__', expect)}"
        )
