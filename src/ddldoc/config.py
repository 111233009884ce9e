"""ContextVar-based generator configuration for ddldoc.

Holds every constant that ends up in a generated document: wiki locations,
placeholder names and the struct-stub dialect. The defaults reproduce the
NintendoClients wiki layout.

Usage:
    from ddldoc.config import GeneratorConfig, config_context

    with config_context(GeneratorConfig(wiki_base="https://example.org/wiki")):
        docs = build_documents(tree)

    # Or from a TOML file
    config = load_config("ddldoc.toml")

"""

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ddldoc.errors import ConfigError


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable generator configuration.

    Attributes:
        wiki_base: Root URL of the documentation wiki
        protocols_page: Wiki page listing all protocols (document header link)
        common_types_page: Wiki page holding the shared type glossary
        root_record_type: Parent type of classes that declare none
        unknown_protocol_id: Placeholder printed next to every protocol name
        unknown_protocol_prefix: Prefix of synthetic protocol names
        return_value_marker: Parameter name the parser gives return values
        stub_language: Info string of the stub code fences
        stub_attributes: Attribute line emitted above every stub struct
        list_stub_type: Generic list type used in stubs
        data_holder_stub_type: Generic any-wrapper type used in stubs
        file_extension: Extension of written documents

    """

    wiki_base: str = "https://github.com/kinnay/NintendoClients/wiki"
    protocols_page: str = "NEX-Protocols"
    common_types_page: str = "NEX-Common-Types"
    root_record_type: str = "Structure"
    unknown_protocol_id: str = "Unknown ID"
    unknown_protocol_prefix: str = "Unknown Protocol"
    return_value_marker: str = "%retval%"
    stub_language: str = "rust"
    stub_attributes: str = "#[derive(Default, EndianRead, EndianWrite)]"
    list_stub_type: str = "NexList"
    data_holder_stub_type: str = "DataHolder"
    file_extension: str = ".md"

    @property
    def protocols_url(self) -> str:
        return f"{self.wiki_base}/{self.protocols_page}"

    def common_type_url(self, anchor: str) -> str:
        """URL of one glossary entry, e.g. ``common_type_url("list")``."""
        return f"{self.wiki_base}/{self.common_types_page}#{anchor}"

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "GeneratorConfig":
        """Create GeneratorConfig from dictionary.

        Only includes keys that are valid GeneratorConfig fields; unknown keys
        are silently ignored.

        Raises:
            ConfigError: If a known key holds a non-string value.

        Example:
            >>> config = GeneratorConfig.from_dict({
            ...     "stub_language": "rs",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.stub_language
            'rs'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key, value in filtered.items():
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
        return cls(**filtered)


def load_config(path: Path | str) -> GeneratorConfig:
    """Load configuration from a TOML file.

    Values are read from a ``[ddldoc]`` table when present, otherwise from
    the top level of the document.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e.strerror}", source=str(path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", source=str(path)) from e

    table = data.get("ddldoc", data)
    if not isinstance(table, dict):
        raise ConfigError("'ddldoc' must be a table", source=str(path))
    try:
        return GeneratorConfig.from_dict(table)
    except ConfigError as e:
        raise ConfigError(str(e), source=str(path)) from e


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: GeneratorConfig = GeneratorConfig()

_generator_config: ContextVar[GeneratorConfig] = ContextVar(
    "generator_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> GeneratorConfig:
    """Get the active generator configuration for this context."""
    return _generator_config.get()


def set_config(config: GeneratorConfig) -> None:
    """Set generator configuration for the current context."""
    _generator_config.set(config)


def reset_config() -> None:
    """Reset to the default configuration."""
    _generator_config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: GeneratorConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(GeneratorConfig(stub_language="rs")):
        ...     get_config().stub_language
        'rs'

    """
    previous = _generator_config.get()
    _generator_config.set(config)
    try:
        yield
    finally:
        _generator_config.set(previous)


__all__ = [
    "GeneratorConfig",
    "config_context",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
