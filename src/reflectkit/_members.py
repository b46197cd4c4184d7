"""Bulk member listing and lookup of classes by qualified name."""

__all__ = ["members", "locate"]

import inspect
import logging
import pydoc

from ._error import MemberNotFound
from ._handle import Kind, Strategy, Visibility, visibility_of
from ._resolve import describe

logger = logging.getLogger(__name__)


def _unmangle(cls, attr):
    stripped = cls.__name__.lstrip("_")
    prefix = f"_{stripped}__"
    if stripped and attr.startswith(prefix) and not attr.endswith("__"):
        return attr[len(prefix) - 2:]
    return attr


def _own_names(klass):
    return set(vars(klass)) | set(inspect.get_annotations(klass))


def members(cls, strategy=Strategy.INHERITED, kind=None):
    """List the members of cls that resolve under a strategy.

    Private names are reported unmangled, the way they are written in the
    class body. Methods the runtime cannot describe a signature for are
    skipped. Every call inspects the class again.

    Args:
        cls: (type) Class to inspect
        strategy: (Strategy) Declared or inherited lookup
        kind: (Kind | None) Only list members of this kind

    Returns:
        (list[MemberHandle]) Handles sorted by name, constructor first
    """
    if strategy is Strategy.DECLARED:
        names = {_unmangle(cls, attr) for attr in _own_names(cls)}
    else:
        names = {
            attr
            for klass in cls.__mro__
            for attr in _own_names(klass)
            if visibility_of(attr) is Visibility.PUBLIC
        }

    handles = []
    if kind in (None, Kind.CONSTRUCTOR):
        try:
            handles.append(describe(cls, "__init__", Kind.CONSTRUCTOR, strategy))
        except MemberNotFound:
            logger.debug("No %s constructor on %s", strategy.value, cls.__qualname__)

    kinds = [k for k in (Kind.FIELD, Kind.METHOD) if kind in (None, k)]
    for name in sorted(names):
        for k in kinds:
            try:
                handles.append(describe(cls, name, k, strategy))
            except MemberNotFound:
                continue
            break
    return handles


def locate(qualified_name):
    """Find a class by dotted name, such as ``collections.OrderedDict``.

    Raises:
        MemberNotFound: If the name does not lead to a class
    """
    found = pydoc.locate(qualified_name)
    if not isinstance(found, type):
        module, _, name = qualified_name.rpartition(".")
        raise MemberNotFound(module or None, name)
    return found
