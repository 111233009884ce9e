"""Whole-protocol Markdown documents.

A document is, in order and separated by blank lines:

1. ``## [NEX-Protocols](...) > <Name> (<ID>)``
2. The method index table
3. One section per method
4. ``# Types`` and one section per class, only if the protocol has classes

The result has no trailing newline.
"""

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.nodes import MethodDefinition, ProtocolDefinition
from ddldoc.renderers.classes import ClassRenderer
from ddldoc.renderers.methods import MethodRenderer
from ddldoc.stringbuilder import StringBuilder
from ddldoc.utils.text import heading_anchor

TYPES_HEADING = "# Types"


class DocumentAssembler:
    """Assemble the documentation page of one protocol.

    Usage:
        >>> assembler = DocumentAssembler()
        >>> markdown = assembler.render(protocol)

    Rendering is a pure function of the definition and the config; the
    same input always produces the same text.

    """

    __slots__ = ("_classes", "_config", "_methods")

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or get_config()
        self._methods = MethodRenderer(self._config)
        self._classes = ClassRenderer(self._config)

    def render(self, protocol: ProtocolDefinition) -> str:
        parts = [self.header(protocol), self.method_index(protocol.methods)]

        for index, method in enumerate(protocol.methods, start=1):
            parts.append(self._methods.render(method, index, protocol.classes).doc)

        if protocol.classes:
            parts.append(TYPES_HEADING)
            for cls in protocol.classes:
                parts.append(self._classes.render(cls, protocol.classes).doc)

        return "\n\n".join(parts)

    def header(self, protocol: ProtocolDefinition) -> str:
        config = self._config
        return (
            f"## [{config.protocols_page}]({config.protocols_url}) > "
            f"{protocol.name} ({protocol.protocol_id})"
        )

    def method_index(self, methods: tuple[MethodDefinition, ...]) -> str:
        """Two-column table linking every method section."""
        sb = StringBuilder()
        sb.append("| Method ID | Method Name |")
        sb.line("| --- | --- |")
        for index, method in enumerate(methods, start=1):
            link = f"[{method.name}](#{heading_anchor(index, method.name)})"
            sb.row([str(index), link])
        return sb.build()


def render_protocol(protocol: ProtocolDefinition, *, config: GeneratorConfig | None = None) -> str:
    """Render one protocol definition to Markdown.

    Args:
        protocol: Extracted protocol
        config: Generator config (uses the active context config if None)

    Returns:
        The complete document.
    """
    return DocumentAssembler(config).render(protocol)
