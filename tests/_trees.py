"""Builders for parse trees in the DDL parser's JSON node shape."""

from typing import Any

REQUEST = 1
RESPONSE = 2


def _named(name: str | None) -> dict[str, Any]:
    return {"nameSpaceItem": {"parseTreeItem1": {"name": {"value": name}}}}


def _type_use(raw_type: str) -> dict[str, Any]:
    return {"declarationUse": {"name": {"value": raw_type}}}


def member(name: str, raw_type: str) -> dict[str, Any]:
    return {"body": {**_named(name), **_type_use(raw_type)}}


def class_decl(name: str, *members: dict[str, Any], parent: str = "") -> dict[str, Any]:
    return {
        "body": {
            "_type": "DDLClassDeclaration",
            "typeDeclaration": {"declaration": _named(name)},
            "parentClassName": {"value": parent},
            "classMembers": {"elements": list(members)},
        }
    }


def param(name: str, raw_type: str, direction: object = REQUEST) -> dict[str, Any]:
    return {
        "body": {
            "_type": "DDLParameter",
            "variable": _named(name),
            **_type_use(raw_type),
            "type": direction,
        }
    }


def return_value(raw_type: str, name: str = "%retval%") -> dict[str, Any]:
    return {
        "body": {
            "_type": "DDLReturnValue",
            "variable": _named(name),
            **_type_use(raw_type),
            "type": 3,
        }
    }


def method(name: str, *params: dict[str, Any]) -> dict[str, Any]:
    return {
        "body": {
            "_type": "DDLMethod",
            "methodDeclaration": {"declaration": _named(name)},
            "parameters": {"elements": list(params)},
        }
    }


def protocol(name: str | None, *methods: dict[str, Any]) -> dict[str, Any]:
    return {
        "body": {
            "_type": "DDLProtocolDeclaration",
            "declaration": _named(name),
            "methods": {"elements": list(methods)},
        }
    }


def tree(*elements: dict[str, Any]) -> dict[str, Any]:
    return {"rootNamespace": {"elements": list(elements)}}
