"""Type resolution for documented fields and parameters.

Maps a raw DDL type token to what the documentation shows, where it links
and which type the struct stub uses. Resolution order:

1. A token naming a class declared in the same document links to the
   in-page anchor and keeps its name in the stub.
2. Tokens in the rename table get their wiki name; that name may still be
   linked to the glossary or to a local class.
3. ``any<Inner, ...>`` stays literal in the docs, ``DataHolder<Inner>`` in
   the stub.
4. The list spellings wrap the resolved element type in the glossary's
   ``List`` entry.
5. Glossary names link to the common types page.
6. Everything else passes through unchanged.

Example:
    >>> resolve_type("uint32").display_text
    'u32'
    >>> resolve_type("qlist<uint32>").stub_type_text
    'NexList<u32>'
    >>> resolve_type("Gathering", {"Gathering"}).display_text
    '[Gathering](#gathering)'

"""

from collections.abc import Collection
from dataclasses import dataclass

from ddldoc.common_types import COMMON_TYPE_ANCHORS, COMMON_TYPE_RENAMES, LIST_GLOSSARY_ENTRY
from ddldoc.config import GeneratorConfig, get_config
from ddldoc.typespec import AnyWrapper, Container, Named, Primitive, TypeSpec, parse_type
from ddldoc.utils.text import encode_entities, heading_anchor


@dataclass(frozen=True, slots=True)
class ResolvedType:
    """Display, link and stub triple for one type token.

    Attributes:
        display_text: Markdown shown in documentation tables (unescaped)
        doc_link: Link target of the outermost type, if any
        stub_type_text: Type used in the struct stub

    """

    display_text: str
    doc_link: str | None
    stub_type_text: str

    @property
    def cell_text(self) -> str:
        """Display text encoded for a table cell."""
        return encode_entities(self.display_text)


class TypeResolver:
    """Resolves raw type tokens against a fixed set of local class names.

    One instance per rendered document; ``local_type_names`` are the
    classes declared in that document.

    """

    __slots__ = ("_config", "_local_names")

    def __init__(
        self,
        local_type_names: Collection[str] = (),
        config: GeneratorConfig | None = None,
    ) -> None:
        self._local_names = frozenset(local_type_names)
        self._config = config or get_config()

    @property
    def local_type_names(self) -> frozenset[str]:
        return self._local_names

    def resolve(self, raw_type: str) -> ResolvedType:
        """Resolve one raw type token."""
        return self._resolve(parse_type(raw_type))

    def _resolve(self, spec: TypeSpec) -> ResolvedType:
        match spec:
            case Named(name) | Primitive(name) if name in self._local_names:
                return self._local(name)
            case Primitive(name):
                renamed = COMMON_TYPE_RENAMES[name]
                if renamed in self._local_names:
                    return self._local(renamed)
                return self._glossary_or_plain(renamed)
            case AnyWrapper(inner, raw):
                return ResolvedType(
                    display_text=raw,
                    doc_link=None,
                    stub_type_text=f"{self._config.data_holder_stub_type}<{inner}>",
                )
            case Container(_, inner):
                element = self._resolve(inner)
                list_url = self._config.common_type_url(COMMON_TYPE_ANCHORS[LIST_GLOSSARY_ENTRY])
                return ResolvedType(
                    display_text=f"[{LIST_GLOSSARY_ENTRY}]({list_url})<{element.display_text}>",
                    doc_link=list_url,
                    stub_type_text=f"{self._config.list_stub_type}<{element.stub_type_text}>",
                )
            case Named(name):
                return self._glossary_or_plain(name)

    def _local(self, name: str) -> ResolvedType:
        anchor = f"#{heading_anchor(name)}"
        return ResolvedType(
            display_text=f"[{name}]({anchor})",
            doc_link=anchor,
            stub_type_text=name,
        )

    def _glossary_or_plain(self, name: str) -> ResolvedType:
        anchor = COMMON_TYPE_ANCHORS.get(name)
        if anchor is None:
            return ResolvedType(display_text=name, doc_link=None, stub_type_text=name)
        url = self._config.common_type_url(anchor)
        return ResolvedType(display_text=f"[{name}]({url})", doc_link=url, stub_type_text=name)


def resolve_type(
    raw_type: str,
    local_type_names: Collection[str] = (),
    *,
    config: GeneratorConfig | None = None,
) -> ResolvedType:
    """Resolve a raw type token.

    Args:
        raw_type: Type spelling as found in the schema
        local_type_names: Classes declared in the same document
        config: Generator config (uses the active context config if None)

    Returns:
        ResolvedType for the token. Unknown tokens resolve to themselves.
    """
    return TypeResolver(local_type_names, config).resolve(raw_type)
