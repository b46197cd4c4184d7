"""Accessibility override for member handles.

Python itself never refuses attribute access, so the access check lives on
the handle. Enabling it raises the ``reflectkit.set_accessible`` audit
event, which lets an audit hook (see ``sys.addaudithook``) veto the
override in a sandboxed process.
"""

__all__ = ["set_accessible", "check_accessible", "AUDIT_EVENT"]

import logging
import sys

from ._error import AccessDenied, IllegalAccess

logger = logging.getLogger(__name__)

AUDIT_EVENT = "reflectkit.set_accessible"


def set_accessible(handle, flag=True):
    """Allow or forbid use of a handle regardless of member visibility.

    Calling it again with the same flag has no further effect. Only the
    handle changes; the class and its members are left untouched.

    Args:
        handle: (MemberHandle) Handle to update
        flag: (bool) New accessibility

    Returns:
        (MemberHandle) The same handle, for chaining

    Raises:
        AccessDenied: If an audit hook rejects the override
    """
    if flag:
        try:
            sys.audit(AUDIT_EVENT, handle.owner, handle.attr)
        except Exception as e:
            raise AccessDenied(
                f"Access to {handle.owner.__qualname__}.{handle.attr} denied: {e}"
            ) from e
    if handle.accessible != flag:
        logger.debug("Set accessible=%s on %s", flag, handle.describe())
    handle.accessible = flag
    return handle


def check_accessible(handle):
    if not handle.accessible:
        raise IllegalAccess(
            f"Cannot use {handle.visibility.value} member "
            f"{handle.owner.__qualname__}.{handle.attr} without set_accessible()"
        )
