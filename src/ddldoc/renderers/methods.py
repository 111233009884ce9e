"""Method sections.

Renders one method as a numbered heading followed by a Request and a
Response subsection. Each subsection is a parameter table (or a notice when
there are none) followed by the struct stub for that direction.
"""

from collections.abc import Collection

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.nodes import ClassDeclaration, MethodDefinition, Parameter
from ddldoc.renderers.protocol import RenderedFragment
from ddldoc.renderers.stub import render_stub
from ddldoc.resolver import TypeResolver
from ddldoc.stringbuilder import StringBuilder

NO_REQUEST_PARAMETERS = "This method does not take any parameters"
NO_RESPONSE_PARAMETERS = "This method does not return anything"

# Field name of return values in the Output stub
RETURN_VALUE_FIELD = "val"


class MethodRenderer:
    """Render methods of one protocol document.

    Usage:
        >>> renderer = MethodRenderer()
        >>> fragment = renderer.render(method, 1, protocol.classes)
        >>> fragment.doc.splitlines()[0]
        '# (1) Hello'

    """

    __slots__ = ("_config",)

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or get_config()

    def render(
        self,
        method: MethodDefinition,
        index: int,
        local_classes: Collection[ClassDeclaration] = (),
    ) -> RenderedFragment:
        """Render a method section.

        Args:
            method: Method with bucketed parameters
            index: 1-based position of the method in its protocol
            local_classes: Classes declared in the same document

        Returns:
            Fragment holding the section and its Input/Output stubs.
        """
        resolver = TypeResolver((cls.name for cls in local_classes), self._config)

        request_stub = render_stub(
            f"{method.name}Input",
            [
                (param.name.lower(), resolver.resolve(param.raw_type).stub_type_text)
                for param in method.request_parameters
            ],
            self._config,
        )
        response_stub = render_stub(
            f"{method.name}Output",
            [
                (self._stub_field_name(param), resolver.resolve(param.raw_type).stub_type_text)
                for param in method.response_parameters
            ],
            self._config,
        )

        sb = StringBuilder()
        sb.append(f"# ({index}) {method.name}")
        sb.line().line("## Request")
        self._parameter_table(sb, method.request_parameters, resolver, NO_REQUEST_PARAMETERS)
        sb.line(request_stub)
        sb.line().line("## Response")
        self._parameter_table(sb, method.response_parameters, resolver, NO_RESPONSE_PARAMETERS)
        sb.line(response_stub)

        return RenderedFragment(doc=sb.build(), stubs=(request_stub, response_stub))

    def _parameter_table(
        self,
        sb: StringBuilder,
        parameters: tuple[Parameter, ...],
        resolver: TypeResolver,
        empty_notice: str,
    ) -> None:
        if not parameters:
            sb.line(empty_notice)
            return
        sb.table_header("Type", "Name", "Description")
        for param in parameters:
            sb.row([resolver.resolve(param.raw_type).cell_text, param.name, ""])

    def _stub_field_name(self, param: Parameter) -> str:
        name = param.name.lower()
        if param.is_return_value or name == self._config.return_value_marker.lower():
            return RETURN_VALUE_FIELD
        return name
