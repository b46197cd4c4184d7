"""Command-line interface for reflectkit.

Prints the members of a class, as resolved by the library, one per line.
"""

import argparse
import logging
import sys

import reflectkit


def format_member(handle):
    """Format one handle as a table row.

    Args:
        handle: (MemberHandle) Handle to format

    Returns:
        (str) Kind, visibility, scope, owner and name with signature
    """
    scope = "static" if handle.is_static else "instance"
    text = f"{handle.kind.value:<12} {handle.visibility.value:<10} {scope:<9} {handle.name}"
    if handle.kind is not reflectkit.Kind.FIELD:
        sig = ", ".join(getattr(t, "__qualname__", str(t)) for t in handle.signature)
        text += f"({sig})"
    if handle.owner is not handle.origin:
        text += f"  [{handle.owner.__qualname__}]"
    return text


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="reflectkit",
        description="List the members of a class as reflectkit resolves them.",
    )
    parser.add_argument("target",
        help="Dotted name of the class, such as collections.OrderedDict")
    parser.add_argument("--declared", action="store_true",
        help="Only members declared on the class itself, at any visibility")
    parser.add_argument("--kind", choices=[k.value for k in reflectkit.Kind],
        help="Only list members of this kind")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Log resolution details to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cls = reflectkit.locate(args.target)
    except reflectkit.MemberNotFound:
        print(f"Error: Cannot find class {args.target!r}", file=sys.stderr)
        sys.exit(1)

    strategy = reflectkit.Strategy.DECLARED if args.declared else reflectkit.Strategy.INHERITED
    kind = reflectkit.Kind(args.kind) if args.kind else None

    handles = reflectkit.members(cls, strategy, kind)
    print(f"{cls.__module__}.{cls.__qualname__} ({strategy.value})")
    for handle in handles:
        print(f"  {format_member(handle)}")


if __name__ == "__main__":
    main()
