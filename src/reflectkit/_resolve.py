"""Member resolution.

Two lookup strategies are supported. Declared lookup only sees what a class
defines itself, at any visibility. Inherited lookup walks the MRO the way
attribute access does, but only ever finds public names.

Nothing is cached, every call inspects the class namespaces again.
"""

__all__ = [
    "resolve",
    "get_field",
    "get_declared_field",
    "get_method",
    "get_declared_method",
    "get_constructor",
    "get_declared_constructor",
    "describe",
    "parameter_types",
]

import functools
import inspect
import logging
import typing

from ._error import MemberNotFound
from ._handle import (
    ConstructorHandle, FieldHandle, Kind, MethodHandle, Strategy, Visibility,
    mangle, visibility_of,
)

logger = logging.getLogger(__name__)

_MISSING = object()

_ANY_SIGNATURE = object()

# Builtin classmethods such as dict.fromkeys
_ClassMethodDescriptor = type(vars(dict)["fromkeys"])

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def resolve(cls, name, kind, strategy=Strategy.INHERITED, signature=None):
    """Resolve a named member of a class.

    Args:
        cls: (type) Class to look the member up on
        name: (str) Member name; private names may be given plain or mangled
        kind: (Kind) Field, method or constructor
        strategy: (Strategy) Declared or inherited lookup
        signature: (Sequence[type] | None) Exact parameter types, required
            for methods and constructors, ignored for fields

    Returns:
        (MemberHandle) A fresh handle, never shared

    Raises:
        MemberNotFound: If nothing matches name, kind and signature
        TypeError: If cls is not a class, or an executable has no signature
    """
    if kind is not Kind.FIELD:
        if signature is None:
            raise TypeError(f"A signature is required to resolve a {kind.value}")
        signature = tuple(signature)
    return _resolve(cls, name, kind, strategy, signature)


def describe(cls, name, kind, strategy=Strategy.INHERITED):
    """Resolve a member whatever its signature turns out to be.

    Used to enumerate members; the handle's signature is the member's own.
    """
    return _resolve(cls, name, kind, strategy, _ANY_SIGNATURE)


def _resolve(cls, name, kind, strategy, signature):
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")
    if kind is Kind.FIELD:
        handle = _resolve_field(cls, name, strategy)
    elif kind is Kind.METHOD:
        handle = _resolve_method(cls, name, strategy, signature)
    else:
        handle = _resolve_constructor(cls, strategy, signature)
    logger.debug("Resolved %s", handle.describe())
    return handle


def get_field(cls, name):
    return resolve(cls, name, Kind.FIELD, Strategy.INHERITED)


def get_declared_field(cls, name):
    return resolve(cls, name, Kind.FIELD, Strategy.DECLARED)


def get_method(cls, name, signature):
    return resolve(cls, name, Kind.METHOD, Strategy.INHERITED, signature)


def get_declared_method(cls, name, signature):
    return resolve(cls, name, Kind.METHOD, Strategy.DECLARED, signature)


def get_constructor(cls, signature=()):
    return resolve(cls, "__init__", Kind.CONSTRUCTOR, Strategy.INHERITED, signature)


def get_declared_constructor(cls, signature=()):
    return resolve(cls, "__init__", Kind.CONSTRUCTOR, Strategy.DECLARED, signature)


# ---------------------------------------------------------------------------
# Namespace inspection
# ---------------------------------------------------------------------------

def _own_entry(cls, attr):
    """Return (value, annotation) for an attribute defined on cls itself.

    Either part is _MISSING when absent. Returns None when cls defines
    neither a value nor an annotation for attr.
    """
    namespace = vars(cls)
    annotations = inspect.get_annotations(cls)
    value = namespace.get(attr, _MISSING)
    annotation = annotations.get(attr, _MISSING)
    if value is _MISSING and annotation is _MISSING:
        return None
    return value, annotation


def _is_classvar(annotation):
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def classify(value, annotation):
    """Classify a namespace entry.

    Returns:
        (tuple[Kind, bool]) Kind and static flag
    """
    if value is _MISSING:
        return Kind.FIELD, _is_classvar(annotation)
    if inspect.ismemberdescriptor(value) or inspect.isgetsetdescriptor(value):
        return Kind.FIELD, False
    if isinstance(value, (property, functools.cached_property)):
        return Kind.FIELD, False
    if isinstance(value, (staticmethod, classmethod, _ClassMethodDescriptor)):
        return Kind.METHOD, True
    if inspect.isroutine(value):
        return Kind.METHOD, False
    if annotation is not _MISSING:
        return Kind.FIELD, _is_classvar(annotation)
    return Kind.FIELD, True


def _declared_candidates(cls, name):
    mangled = mangle(cls, name)
    if mangled != name:
        return [mangled, name]
    return [name]


def _find(cls, name, kind, strategy):
    """Locate (owner, attr, value, annotation, is_static) for a member.

    Raises MemberNotFound when the name is missing under the strategy or
    names a member of another kind.
    """
    if strategy is Strategy.DECLARED:
        for attr in _declared_candidates(cls, name):
            entry = _own_entry(cls, attr)
            if entry is not None:
                found = classify(*entry)
                if found[0] is kind:
                    return cls, attr, entry[0], entry[1], found[1]
        raise MemberNotFound(cls, name, kind, strategy)

    if visibility_of(name) is not Visibility.PUBLIC:
        raise MemberNotFound(cls, name, kind, strategy)
    for klass in cls.__mro__:
        entry = _own_entry(klass, name)
        if entry is None:
            continue
        found = classify(*entry)
        if found[0] is not kind:
            break
        return klass, name, entry[0], entry[1], found[1]
    raise MemberNotFound(cls, name, kind, strategy)


# ---------------------------------------------------------------------------
# Signatures
# ---------------------------------------------------------------------------

def _unwrap(member):
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def callable_signature(func, bound=True):
    """inspect.Signature of func, without the receiver when bound.

    String annotations are evaluated when they can be. Returns None for
    callables the runtime cannot describe.
    """
    try:
        try:
            sig = inspect.signature(func, eval_str=True)
        except (NameError, AttributeError):
            sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    params = list(sig.parameters.values())
    if bound and params and params[0].kind in _POSITIONAL:
        sig = sig.replace(parameters=params[1:])
    return sig


def parameter_types(sig):
    """Positional parameter types of a signature, as used for exact matching.

    Unannotated parameters count as object and ``*args`` counts as tuple.
    Keyword-only parameters and ``**kwargs`` are left out.
    """
    types = []
    for param in sig.parameters.values():
        if param.kind in _POSITIONAL:
            annotation = param.annotation
            if annotation is param.empty or annotation is typing.Any:
                annotation = object
            types.append(annotation)
        elif param.kind is param.VAR_POSITIONAL:
            types.append(tuple)
    return tuple(types)


def _matches(sig, signature):
    if sig is None:
        return False
    return signature is _ANY_SIGNATURE or parameter_types(sig) == signature


def _not_found(cls, name, kind, strategy, signature):
    if signature is _ANY_SIGNATURE:
        signature = None
    return MemberNotFound(cls, name, kind, strategy, signature)


# ---------------------------------------------------------------------------
# Per kind resolution
# ---------------------------------------------------------------------------

def _resolve_field(cls, name, strategy):
    owner, attr, _value, annotation, is_static = _find(cls, name, Kind.FIELD, strategy)
    return FieldHandle(
        name=name,
        attr=attr,
        owner=owner,
        origin=cls,
        visibility=visibility_of(attr, owner),
        is_static=is_static,
        annotation=inspect.Parameter.empty if annotation is _MISSING else annotation,
    )


def _resolve_method(cls, name, strategy, signature):
    owner, attr, member, _annotation, is_static = _find(cls, name, Kind.METHOD, strategy)
    bound = not isinstance(member, staticmethod)
    sig = callable_signature(_unwrap(member), bound)
    if not _matches(sig, signature):
        raise _not_found(cls, name, Kind.METHOD, strategy, signature)
    return MethodHandle(
        name=name,
        attr=attr,
        owner=owner,
        origin=cls,
        visibility=visibility_of(attr, owner),
        is_static=is_static,
        member=member,
        parameters=sig,
        signature=parameter_types(sig),
    )


def _own_constructor(klass):
    namespace = vars(klass)
    for attr in ("__init__", "__new__"):
        if attr in namespace:
            return attr, namespace[attr]
    return None


def _resolve_constructor(cls, strategy, signature):
    found = None
    if strategy is Strategy.DECLARED:
        own = _own_constructor(cls)
        if own is not None:
            found = (cls,) + own
    else:
        for klass in cls.__mro__[:-1]:
            own = _own_constructor(klass)
            if own is not None:
                found = (klass,) + own
                break

    if found is None:
        # Only a class with no constructor anywhere gets the implicit one.
        implicit = inspect.Signature()
        if any(_own_constructor(k) for k in cls.__mro__[:-1]) or not _matches(implicit, signature):
            raise _not_found(cls, "__init__", Kind.CONSTRUCTOR, strategy, signature)
        return ConstructorHandle(
            name="__init__", attr="__init__", owner=cls, origin=cls,
            visibility=Visibility.PUBLIC, is_static=True,
            parameters=implicit, signature=(),
        )

    owner, attr, member = found
    sig = callable_signature(_unwrap(member), bound=True)
    if not _matches(sig, signature):
        raise _not_found(cls, "__init__", Kind.CONSTRUCTOR, strategy, signature)
    return ConstructorHandle(
        name="__init__",
        attr=attr,
        owner=owner,
        origin=cls,
        visibility=Visibility.PUBLIC,
        is_static=True,
        member=member,
        parameters=sig,
        signature=parameter_types(sig),
    )
