"""Struct stub code blocks.

Every method gets an ``<Name>Input`` and ``<Name>Output`` struct, every
class a struct of its own name. All of them share one shape:

    ```rust
    #[derive(Default, EndianRead, EndianWrite)]
    pub struct HelloInput {
        name: NexString,
    }
    ```

"""

from collections.abc import Iterable

from ddldoc.config import GeneratorConfig, get_config
from ddldoc.stringbuilder import StringBuilder


def render_stub(
    struct_name: str,
    fields: Iterable[tuple[str, str]],
    config: GeneratorConfig | None = None,
) -> str:
    """Render a fenced struct stub.

    Args:
        struct_name: Name of the generated struct
        fields: ``(field name, stub type)`` pairs in order; may be empty
        config: Generator config (uses the active context config if None)

    Returns:
        The code block, without a trailing newline.
    """
    config = config or get_config()
    sb = StringBuilder()
    sb.append(f"```{config.stub_language}")
    sb.line(config.stub_attributes)
    sb.line(f"pub struct {struct_name} {{")
    for name, stub_type in fields:
        sb.line(f"    {name}: {stub_type},")
    sb.line("}")
    sb.line("```")
    return sb.build()
