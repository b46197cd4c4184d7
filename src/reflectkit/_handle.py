"""Member handles and the small vocabulary shared by every lookup.

A handle is the result of resolving one named member on one class. It is
created for a single call and thrown away afterwards; nothing here keeps
handles alive or shares them between calls.
"""

__all__ = [
    "Strategy",
    "Kind",
    "Visibility",
    "MemberHandle",
    "FieldHandle",
    "MethodHandle",
    "ConstructorHandle",
    "visibility_of",
    "mangle",
]

import enum
import inspect
import typing
from dataclasses import dataclass, field


class Strategy(enum.Enum):
    """How a member name is looked up on a class."""

    DECLARED = "declared"
    INHERITED = "inherited"


class Kind(enum.Enum):
    """Which sort of member a lookup is for."""

    FIELD = "field"
    METHOD = "method"
    CONSTRUCTOR = "constructor"


class Visibility(enum.Enum):
    """Visibility implied by Python's naming conventions."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


def mangle(cls, name):
    """Return the attribute name Python stores a private name under.

    Names that are not private (no double leading underscore, or dunder
    names) come back unchanged, as do names inside classes whose name is
    made only of underscores.
    """
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = cls.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


def visibility_of(name, owner=None):
    """Visibility of an attribute name, optionally as seen inside owner.

    Args:
        name: (str) Attribute name, plain or already mangled
        owner: (type | None) Declaring class, used to recognize mangled names

    Returns:
        (Visibility)
    """
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("__"):
        return Visibility.PRIVATE
    if owner is not None:
        stripped = owner.__name__.lstrip("_")
        if stripped and name.startswith(f"_{stripped}__"):
            return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


@dataclass
class MemberHandle:
    """A resolved reference to one member.

    Attributes:
        name: (str) Name as requested by the caller
        attr: (str) Real attribute name, mangled for private members
        owner: (type) Class that declares the member
        origin: (type) Class the lookup was made on
        visibility: (Visibility)
        is_static: (bool) True when no receiver is used
        accessible: (bool) Whether the handle may be read or invoked
    """

    name: str
    attr: str
    owner: type
    origin: type
    visibility: Visibility
    is_static: bool = False
    accessible: bool = False

    kind: typing.ClassVar[Kind]

    def __post_init__(self):
        if self.visibility is Visibility.PUBLIC:
            self.accessible = True

    def describe(self):
        """Short human readable summary used by the CLI and in logs."""
        scope = "static" if self.is_static else "instance"
        return f"{self.visibility.value} {scope} {self.kind.value} {self.owner.__qualname__}.{self.attr}"


@dataclass
class FieldHandle(MemberHandle):
    """Handle for a class attribute, slot, property or annotated field."""

    annotation: typing.Any = field(default=inspect.Parameter.empty, repr=False)

    kind: typing.ClassVar[Kind] = Kind.FIELD


@dataclass
class _ExecutableHandle(MemberHandle):
    # member is the raw class namespace entry (function, staticmethod,
    # classmethod, builtin descriptor) or None for an implicit constructor.
    member: typing.Any = field(default=None, repr=False)
    parameters: typing.Optional[inspect.Signature] = field(default=None, repr=False)
    signature: tuple = ()

    def describe(self):
        sig = ", ".join(_type_name(t) for t in self.signature)
        return f"{super().describe()}({sig})"


@dataclass
class MethodHandle(_ExecutableHandle):
    """Handle for a function, staticmethod, classmethod or method descriptor."""

    kind: typing.ClassVar[Kind] = Kind.METHOD


@dataclass
class ConstructorHandle(_ExecutableHandle):
    """Handle for the ``__init__`` or ``__new__`` that builds instances."""

    kind: typing.ClassVar[Kind] = Kind.CONSTRUCTOR

    @property
    def is_implicit(self):
        return self.member is None


def _type_name(t):
    if isinstance(t, type):
        return t.__qualname__
    return str(t)
