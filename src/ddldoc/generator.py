"""Documentation generation runs.

Drives extraction over a whole tree, assembles one document per protocol
and hands it to a writer as soon as it is finished.

Example:
    from ddldoc import generate_documentation, load_tree

    paths = generate_documentation(load_tree("nex.json"), "docs/protocols")

"""

from collections.abc import Collection
from pathlib import Path

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.extractor import RunState, iter_protocols
from ddldoc.nodes import ParseTree
from ddldoc.renderers.document import DocumentAssembler
from ddldoc.renderers.protocol import DocumentRenderer
from ddldoc.utils.logger import get_logger
from ddldoc.writer import DocumentWriter, FileSystemWriter

logger = get_logger(__name__)


def generate_documentation(
    tree: ParseTree,
    output_dir: Path | str,
    *,
    config: GeneratorConfig | None = None,
    run_state: RunState | None = None,
    writer: DocumentWriter | None = None,
) -> list[Path]:
    """Write one Markdown document per protocol in the tree.

    Documents are written as they are assembled, so protocols before a
    structural error are already on disk when it is raised.

    Args:
        tree: Decoded parse tree
        output_dir: Directory receiving ``<ProtocolName>.md`` files
        config: Generator config (uses the active context config if None)
        run_state: Counter for synthetic names (process-wide default if None)
        writer: Document sink (``FileSystemWriter`` if None)

    Returns:
        Paths of the written documents, in protocol order.

    Raises:
        UnknownParameterDirectionError: On a parameter with an unknown direction.
        OSError: If a document cannot be written.
    """
    config = config or get_config()
    writer = writer or FileSystemWriter()
    directory = Path(output_dir)
    renderer: DocumentRenderer = DocumentAssembler(config)

    written: list[Path] = []
    seen: set[str] = set()
    for protocol in iter_protocols(tree, run_state=run_state, config=config):
        _warn_if_repeated(protocol.name, seen)
        seen.add(protocol.name)
        markdown = renderer.render(protocol)
        path = writer.write(directory, f"{protocol.name}{config.file_extension}", markdown)
        logger.info("Writing protocol documentation to %s", path)
        written.append(path)
    return written


def build_documents(
    tree: ParseTree,
    *,
    config: GeneratorConfig | None = None,
    run_state: RunState | None = None,
) -> dict[str, str]:
    """Render every protocol without writing anything.

    Returns:
        Mapping of protocol name to Markdown document, in protocol order.
    """
    config = config or get_config()
    renderer: DocumentRenderer = DocumentAssembler(config)
    documents: dict[str, str] = {}
    for protocol in iter_protocols(tree, run_state=run_state, config=config):
        _warn_if_repeated(protocol.name, documents)
        documents[protocol.name] = renderer.render(protocol)
    return documents


def _warn_if_repeated(name: str, seen: Collection[str]) -> None:
    if name in seen:
        logger.warning("Protocol %s is declared more than once; the last one wins", name)
