"""Class (record type) sections for the ``# Types`` appendix."""

from collections.abc import Collection

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.nodes import ClassDeclaration
from ddldoc.renderers.protocol import RenderedFragment
from ddldoc.renderers.stub import render_stub
from ddldoc.resolver import TypeResolver
from ddldoc.stringbuilder import StringBuilder

# Members containing this are padding in the schema
PADDING_MARKER = "dummy"


class ClassRenderer:
    """Render one class as a member table plus its struct stub.

    The heading shows the parent type, resolved like any member type and
    defaulting to the root record type. A parent declared in the same
    document becomes the first stub field. Padding members are documented
    but left out of the stub.

    """

    __slots__ = ("_config",)

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or get_config()

    def render(
        self,
        cls: ClassDeclaration,
        local_classes: Collection[ClassDeclaration] = (),
    ) -> RenderedFragment:
        resolver = TypeResolver((c.name for c in local_classes), self._config)

        parent = resolver.resolve(cls.parent_name or self._config.root_record_type)
        fields: list[tuple[str, str]] = []
        if parent.stub_type_text in resolver.local_type_names:
            fields.append((parent.stub_type_text.lower(), parent.stub_type_text))

        sb = StringBuilder()
        sb.append(f"## {cls.name} ({parent.display_text})")
        sb.table_header("Name", "Type")
        for member in cls.members:
            resolved = resolver.resolve(member.raw_type)
            sb.row([member.name, resolved.cell_text])
            if PADDING_MARKER not in member.name:
                fields.append((member.name, resolved.stub_type_text))

        stub = render_stub(cls.name, fields, self._config)
        sb.line(stub)
        return RenderedFragment(doc=sb.build(), stubs=(stub,))
