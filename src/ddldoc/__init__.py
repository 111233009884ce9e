"""
ddldoc — Markdown reference documentation for NEX DDL protocols

Turns the parse tree of a DDL protocol description into one Markdown page
per protocol: a method index, request/response tables for every method, a
``# Types`` appendix for the record types, and Rust struct stubs next to
each of them. Type names are normalized to the NintendoClients wiki and
linked to its common-type glossary.

Quick Start:
    >>> from ddldoc import build_documents, load_tree
    >>> docs = build_documents(load_tree("matchmaking.json"))
    >>> print(docs["MatchMakingProtocol"].splitlines()[0])
    ## [NEX-Protocols](https://github.com/kinnay/NintendoClients/wiki/NEX-Protocols) > ...

    >>> # Write <Protocol>.md files
    >>> from ddldoc import generate_documentation
    >>> generate_documentation(load_tree("matchmaking.json"), "docs")

Type resolution on its own:
    >>> from ddldoc import resolve_type
    >>> resolve_type("qlist<uint32>").stub_type_text
    'NexList<u32>'

Command line:
    ddldoc matchmaking.json -o docs
"""

from ddldoc.config import (
    GeneratorConfig,
    config_context,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from ddldoc.errors import ConfigError, DdlDocError, TreeShapeError, UnknownParameterDirectionError
from ddldoc.extractor import RunState, default_run_state, extract, iter_protocols
from ddldoc.generator import build_documents, generate_documentation
from ddldoc.nodes import (
    ClassDeclaration,
    ClassMember,
    Declaration,
    MethodDeclaration,
    MethodDefinition,
    Parameter,
    ParameterDirection,
    ParseTree,
    ProtocolDeclaration,
    ProtocolDefinition,
)
from ddldoc.renderers import (
    ClassRenderer,
    DocumentAssembler,
    DocumentRenderer,
    MethodRenderer,
    RenderedFragment,
    render_protocol,
)
from ddldoc.resolver import ResolvedType, TypeResolver, resolve_type
from ddldoc.tree import decode_tree, from_json, load_tree
from ddldoc.writer import DocumentWriter, FileSystemWriter, MemoryWriter

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "generate_documentation",
    "build_documents",
    "render_protocol",
    "resolve_type",
    # Input
    "decode_tree",
    "from_json",
    "load_tree",
    # Extraction
    "extract",
    "iter_protocols",
    "RunState",
    "default_run_state",
    # Model
    "ClassDeclaration",
    "ClassMember",
    "Declaration",
    "MethodDeclaration",
    "MethodDefinition",
    "Parameter",
    "ParameterDirection",
    "ParseTree",
    "ProtocolDeclaration",
    "ProtocolDefinition",
    # Resolution
    "ResolvedType",
    "TypeResolver",
    # Renderers
    "ClassRenderer",
    "DocumentAssembler",
    "DocumentRenderer",
    "MethodRenderer",
    "RenderedFragment",
    # Writers
    "DocumentWriter",
    "FileSystemWriter",
    "MemoryWriter",
    # Configuration (ContextVar-based)
    "GeneratorConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    "load_config",
    # Errors
    "DdlDocError",
    "TreeShapeError",
    "UnknownParameterDirectionError",
    "ConfigError",
]
