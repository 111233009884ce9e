"""Minimal grammar for raw DDL type tokens.

A raw token is parsed once into one of four shapes and resolution
dispatches over the shape instead of re-testing string prefixes:

    >>> parse_type("uint32")
    Primitive(name='uint32')
    >>> parse_type("qlist<Gathering>")
    Container(kind='qlist', inner=Named(name='Gathering'))
    >>> parse_type("any<Gathering, string>")
    AnyWrapper(inner='Gathering', raw='any<Gathering, string>')
    >>> parse_type("std_map<uint32, string>")
    Named(name='std_map<uint32, string>')

Tokens listed in the rename table are always ``Primitive``, even when they
look generic (``qvector<byte>``, ``any<Data,string>``).
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import TypeAlias

from ddldoc.common_types import ANY_WRAPPER, COMMON_TYPE_RENAMES, LIST_CONTAINERS


@dataclass(frozen=True, slots=True)
class Primitive:
    """A token with an entry in the rename table."""

    name: str


@dataclass(frozen=True, slots=True)
class Container:
    """One of the equivalent list spellings wrapping an element type."""

    kind: str
    inner: "TypeSpec"


@dataclass(frozen=True, slots=True)
class AnyWrapper:
    """``any<Inner, ...>`` holder. ``inner`` is kept as written."""

    inner: str
    raw: str


@dataclass(frozen=True, slots=True)
class Named:
    """Anything else: local classes, glossary types, unknown spellings."""

    name: str


TypeSpec: TypeAlias = Primitive | Container | AnyWrapper | Named


def parse_type(raw: str, primitives: Collection[str] = COMMON_TYPE_RENAMES) -> TypeSpec:
    """Parse a raw type token.

    Args:
        raw: Type spelling as found in the schema
        primitives: Tokens that resolve through the rename table

    Returns:
        The parsed type shape. Malformed generics fall back to ``Named``.
    """
    token = raw.strip()
    if token in primitives:
        return Primitive(token)

    head, args = _split_generic(token)
    if args is None:
        return Named(token)
    if head in LIST_CONTAINERS and len(args) == 1:
        return Container(head, parse_type(args[0], primitives))
    if head == ANY_WRAPPER and args:
        return AnyWrapper(args[0], token)
    return Named(token)


def _split_generic(token: str) -> tuple[str, list[str] | None]:
    """Split ``head<a, b<c>>`` into ``("head", ["a", "b<c>"])``.

    Returns ``(token, None)`` when the token is not a well-formed generic.
    """
    open_at = token.find("<")
    if open_at <= 0 or not token.endswith(">"):
        return token, None

    head = token[:open_at].strip()
    body = token[open_at + 1 : -1]

    args: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth < 0:
                return token, None
        elif ch == "," and depth == 0:
            args.append(body[start:i].strip())
            start = i + 1
    if depth != 0:
        return token, None
    args.append(body[start:].strip())

    if any(not arg for arg in args):
        return token, None
    return head, args
