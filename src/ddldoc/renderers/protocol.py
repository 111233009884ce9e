"""Renderer protocol and fragment type shared by the ddldoc renderers.

Any renderer that implements ``render(protocol) -> str`` conforms to
``DocumentRenderer``. The built-in ``DocumentAssembler`` is the reference
implementation.

Example:
    from ddldoc.renderers.protocol import DocumentRenderer

    def publish(renderer: DocumentRenderer, protocol: ProtocolDefinition) -> str:
        return renderer.render(protocol)

"""

from dataclasses import dataclass
from typing import Protocol

from ddldoc.nodes import ProtocolDefinition


@dataclass(frozen=True, slots=True)
class RenderedFragment:
    """Documentation for one method or class.

    Attributes:
        doc: Markdown section, stub code blocks included in place
        stubs: The struct stub code blocks on their own, in document order

    """

    doc: str
    stubs: tuple[str, ...] = ()

    @property
    def stub(self) -> str:
        """All stub blocks separated by blank lines."""
        return "\n\n".join(self.stubs)


class DocumentRenderer(Protocol):
    """Protocol for whole-document renderers."""

    def render(self, protocol: ProtocolDefinition) -> str:
        """Render one protocol definition to a document string."""
        ...
