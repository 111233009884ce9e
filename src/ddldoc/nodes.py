"""Typed model for DDL protocol descriptions.

Declarations are decoded once from the parser's node tree (see
``ddldoc.tree``) into a closed variant of two kinds. Consumers switch over
it with ``match``:

    match declaration:
        case ClassDeclaration():
            ...
        case ProtocolDeclaration():
            ...

Declaration (decoded input)
├── ClassDeclaration      members: ClassMember
└── ProtocolDeclaration   methods: MethodDeclaration -> Parameter

ProtocolDefinition (extracted, one per output document)
└── methods: MethodDefinition (parameters bucketed into request/response)

All nodes are frozen dataclasses with slots and safe to share.

"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias


class ParameterDirection(IntEnum):
    """Direction tags used by the DDL parser."""

    REQUEST = 1
    RESPONSE = 2


# =============================================================================
# Decoded declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClassMember:
    """One member of a record type."""

    name: str
    raw_type: str


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """A structured record type.

    An empty ``parent_name`` means no explicit parent; renderers substitute
    the configured root record type.

    """

    name: str
    parent_name: str = ""
    members: tuple[ClassMember, ...] = ()


@dataclass(frozen=True, slots=True)
class Parameter:
    """A method parameter as declared.

    ``direction_tag`` is kept raw; the extractor validates it. Return values
    are always response parameters whatever their tag says.

    """

    name: str
    raw_type: str
    direction_tag: object = ParameterDirection.REQUEST
    is_return_value: bool = False


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    name: str
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, slots=True)
class ProtocolDeclaration:
    """A named collection of methods. ``name`` is empty when the parser found none."""

    name: str
    methods: tuple[MethodDeclaration, ...] = ()


Declaration: TypeAlias = ClassDeclaration | ProtocolDeclaration


@dataclass(frozen=True, slots=True)
class ParseTree:
    """Top-level declarations in source order."""

    elements: tuple[Declaration, ...] = ()


# =============================================================================
# Extracted definitions
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodDefinition:
    """A method with its parameters split by direction.

    Response parameters list return values first, then declared outputs in
    declaration order.

    """

    name: str
    request_parameters: tuple[Parameter, ...] = ()
    response_parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, slots=True)
class ProtocolDefinition:
    """Everything one output document is built from.

    Attributes:
        name: Resolved protocol name (synthetic when the tree had none)
        protocol_id: Identifier shown in the header
        methods: Methods in declaration order (numbered from 1)
        classes: Class declarations seen since the previous protocol

    """

    name: str
    protocol_id: str
    methods: tuple[MethodDefinition, ...] = ()
    classes: tuple[ClassDeclaration, ...] = ()

    @property
    def class_names(self) -> frozenset[str]:
        return frozenset(cls.name for cls in self.classes)
