"""Decoding of the DDL parser's node tree.

The parser is an external collaborator; its tree reaches us as JSON with a
``_type`` discriminator on every declaration body. This module reads only
the node shapes listed below and turns them into ``ddldoc.nodes`` once, so
nothing downstream touches raw dicts:

    {"rootNamespace": {"elements": [{"body": <declaration>}, ...]}}

    DDLClassDeclaration     typeDeclaration.declaration.<name>,
                            parentClassName.value,
                            classMembers.elements[].body.{<name>, declarationUse}
    DDLProtocolDeclaration  declaration.<name>, methods.elements[].body
    DDLMethod               methodDeclaration.declaration.<name>,
                            parameters.elements[].body
    DDLParameter            variable.<name>, declarationUse, type
    DDLReturnValue          same as DDLParameter

where ``<name>`` is ``nameSpaceItem.parseTreeItem1.name.value`` and
``declarationUse`` is ``declarationUse.name.value``.

Elements of any other kind (namespaces, typedefs, ...) carry nothing the
documentation needs and are skipped.

Example:
    from ddldoc.tree import load_tree

    tree = load_tree("matchmaking.json")
    for element in tree.elements:
        ...

"""

import json
from pathlib import Path
from typing import Any

from ddldoc.errors import TreeShapeError
from ddldoc.nodes import (
    ClassDeclaration,
    ClassMember,
    Declaration,
    MethodDeclaration,
    Parameter,
    ParseTree,
    ProtocolDeclaration,
)
from ddldoc.utils.logger import get_logger

logger = get_logger(__name__)

CLASS_DECLARATION = "DDLClassDeclaration"
PROTOCOL_DECLARATION = "DDLProtocolDeclaration"
METHOD = "DDLMethod"
PARAMETER = "DDLParameter"
RETURN_VALUE = "DDLReturnValue"

_NAME_PATH = ("nameSpaceItem", "parseTreeItem1", "name", "value")
_TYPE_PATH = ("declarationUse", "name", "value")


def decode_tree(data: dict[str, Any]) -> ParseTree:
    """Decode a parse tree from its JSON-compatible form.

    Args:
        data: Root node with ``rootNamespace.elements``

    Returns:
        ParseTree with class and protocol declarations in source order.

    Raises:
        TreeShapeError: If a required node or key is missing.
    """
    elements = _elements(data, "rootNamespace")

    declarations: list[Declaration] = []
    for i, element in enumerate(elements):
        path = f"rootNamespace.elements[{i}].body"
        body = _get(element, ("body",), path.removesuffix(".body"))
        declaration = _decode_declaration(body, path)
        if declaration is not None:
            declarations.append(declaration)
    return ParseTree(elements=tuple(declarations))


def from_json(data: str) -> ParseTree:
    """Decode a parse tree from a JSON string.

    Raises:
        TreeShapeError: If the JSON is invalid or doesn't match the node shape.
    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise TreeShapeError(f"invalid JSON: {e.msg} (line {e.lineno})") from e
    if not isinstance(raw, dict):
        raise TreeShapeError(f"expected a JSON object, got {type(raw).__name__}")
    return decode_tree(raw)


def load_tree(path: Path | str) -> ParseTree:
    """Read and decode a parse tree file.

    OSError from reading the file propagates unchanged.
    """
    return from_json(Path(path).read_text(encoding="utf-8"))


def _decode_declaration(body: Any, path: str) -> Declaration | None:
    match _type_of(body, path):
        case "DDLClassDeclaration":
            return _decode_class(body, path)
        case "DDLProtocolDeclaration":
            return _decode_protocol(body, path)
        case other:
            logger.debug("Skipping %s at %s", other, path)
            return None


def _decode_class(body: dict[str, Any], path: str) -> ClassDeclaration:
    name = _get(body, ("typeDeclaration", "declaration", *_NAME_PATH), path)
    parent = _get(body, ("parentClassName", "value"), path)

    members: list[ClassMember] = []
    for i, element in enumerate(_elements(body, "classMembers", path)):
        member_path = f"{path}.classMembers.elements[{i}].body"
        member = _get(element, ("body",), member_path)
        members.append(
            ClassMember(
                name=_get(member, _NAME_PATH, member_path),
                raw_type=_get(member, _TYPE_PATH, member_path),
            )
        )

    return ClassDeclaration(name=name, parent_name=parent or "", members=tuple(members))


def _decode_protocol(body: dict[str, Any], path: str) -> ProtocolDeclaration:
    name = _get(body, ("declaration", *_NAME_PATH), path)

    methods: list[MethodDeclaration] = []
    for i, element in enumerate(_elements(body, "methods", path)):
        method_path = f"{path}.methods.elements[{i}].body"
        methods.append(_decode_method(_get(element, ("body",), method_path), method_path))

    return ProtocolDeclaration(name=name or "", methods=tuple(methods))


def _decode_method(body: Any, path: str) -> MethodDeclaration:
    name = _get(body, ("methodDeclaration", "declaration", *_NAME_PATH), path)

    parameters: list[Parameter] = []
    for i, element in enumerate(_elements(body, "parameters", path)):
        param_path = f"{path}.parameters.elements[{i}].body"
        param = _get(element, ("body",), param_path)
        kind = _type_of(param, param_path)
        if kind not in (PARAMETER, RETURN_VALUE):
            raise TreeShapeError(f"expected a parameter node, got {kind!r}", param_path)
        parameters.append(
            Parameter(
                name=_get(param, ("variable", *_NAME_PATH), param_path),
                raw_type=_get(param, _TYPE_PATH, param_path),
                direction_tag=param.get("type"),
                is_return_value=kind == RETURN_VALUE,
            )
        )

    return MethodDeclaration(name=name, parameters=tuple(parameters))


def _type_of(node: Any, path: str) -> str:
    if not isinstance(node, dict):
        raise TreeShapeError(f"expected a node object, got {type(node).__name__}", path)
    type_name = node.get("_type")
    if type_name is None:
        raise TreeShapeError("missing '_type' field", path)
    return type_name


def _elements(node: Any, key: str, path: str = "") -> list[Any]:
    prefix = f"{path}." if path else ""
    elements = _get(node, (key, "elements"), path)
    if not isinstance(elements, list):
        raise TreeShapeError("expected a list", f"{prefix}{key}.elements")
    return elements


def _get(node: Any, keys: tuple[str, ...], path: str) -> Any:
    """Follow ``keys`` from ``node``; report the first missing one."""
    current = node
    walked = path
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            raise TreeShapeError(f"missing '{key}'", walked or None)
        current = current[key]
        walked = f"{walked}.{key}" if walked else key
    return current
