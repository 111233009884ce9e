"""Protocol extraction from a decoded parse tree.

Walks the top-level declarations once, left to right. Class declarations
are buffered and handed to the next protocol declaration, after which the
buffer starts over. Each protocol yields one ``ProtocolDefinition``, i.e.
one output document.

Protocols without a name get ``Unknown Protocol - N``. ``N`` comes from a
``RunState``; the process-wide default one is never reset, so extracting
the same tree twice in one process produces different synthetic names.
Pass a fresh ``RunState`` to start from 0.

Example:
    from ddldoc.extractor import RunState, extract

    for protocol in extract(tree, run_state=RunState()):
        print(protocol.name, len(protocol.methods))

"""

from collections.abc import Iterator
from dataclasses import dataclass

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.errors import UnknownParameterDirectionError
from ddldoc.nodes import (
    ClassDeclaration,
    MethodDeclaration,
    MethodDefinition,
    Parameter,
    ParameterDirection,
    ParseTree,
    ProtocolDeclaration,
    ProtocolDefinition,
)
from ddldoc.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class RunState:
    """State that survives protocol boundaries.

    Attributes:
        unknown_protocol_count: Synthetic names handed out so far

    """

    unknown_protocol_count: int = 0

    def next_unknown_protocol_name(self, prefix: str) -> str:
        """Return ``"<prefix> - N"`` and advance the counter."""
        name = f"{prefix} - {self.unknown_protocol_count}"
        self.unknown_protocol_count += 1
        return name


_PROCESS_RUN_STATE = RunState()


def default_run_state() -> RunState:
    """The process-wide run state used when callers pass none."""
    return _PROCESS_RUN_STATE


def iter_protocols(
    tree: ParseTree,
    *,
    run_state: RunState | None = None,
    config: GeneratorConfig | None = None,
) -> Iterator[ProtocolDefinition]:
    """Yield one definition per protocol declaration, in source order.

    Args:
        tree: Decoded parse tree
        run_state: Counter for synthetic names (process-wide default if None)
        config: Generator config (uses the active context config if None)

    Raises:
        UnknownParameterDirectionError: If any parameter has an unknown direction.
            Protocols already yielded stay valid; nothing after them is produced.
    """
    state = run_state if run_state is not None else default_run_state()
    config = config or get_config()

    pending_classes: list[ClassDeclaration] = []
    for element in tree.elements:
        match element:
            case ClassDeclaration():
                pending_classes.append(element)
            case ProtocolDeclaration():
                name = element.name
                if not name:
                    name = state.next_unknown_protocol_name(config.unknown_protocol_prefix)
                    logger.warning("Could not determine real protocol name. Defaulting to %s", name)

                logger.info("Found NEX protocol: %s", name)

                yield ProtocolDefinition(
                    name=name,
                    protocol_id=config.unknown_protocol_id,
                    methods=tuple(_bucket_parameters(m, name) for m in element.methods),
                    classes=tuple(pending_classes),
                )
                pending_classes = []

    if pending_classes:
        logger.debug(
            "Dropping %d class declaration(s) after the last protocol: %s",
            len(pending_classes),
            ", ".join(cls.name for cls in pending_classes),
        )


def extract(
    tree: ParseTree,
    *,
    run_state: RunState | None = None,
    config: GeneratorConfig | None = None,
) -> list[ProtocolDefinition]:
    """Extract every protocol of the tree.

    Unlike ``iter_protocols`` this either returns all protocols or raises.
    """
    return list(iter_protocols(tree, run_state=run_state, config=config))


def _bucket_parameters(method: MethodDeclaration, protocol_name: str) -> MethodDefinition:
    """Split parameters into request and response lists.

    Return values come first in the response list, in declaration order
    among themselves.
    """
    request: list[Parameter] = []
    returns: list[Parameter] = []
    outputs: list[Parameter] = []

    for param in method.parameters:
        if param.is_return_value:
            returns.append(param)
            continue
        # bool and float tags compare equal to 1 and 2 but are not directions
        tag = param.direction_tag
        is_integer = isinstance(tag, int) and not isinstance(tag, bool)
        match tag if is_integer else None:
            case ParameterDirection.REQUEST:
                request.append(param)
            case ParameterDirection.RESPONSE:
                outputs.append(param)
            case _:
                raise UnknownParameterDirectionError(
                    param.direction_tag,
                    method_name=method.name,
                    parameter_name=param.name,
                    protocol_name=protocol_name,
                )

    return MethodDefinition(
        name=method.name,
        request_parameters=tuple(request),
        response_parameters=(*returns, *outputs),
    )
