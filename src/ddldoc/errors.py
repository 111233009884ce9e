"""Exception classes for ddldoc.

Structural problems with the input tree abort the whole run. Type tokens
that cannot be resolved are not errors: they are rendered verbatim.
"""

from __future__ import annotations


class DdlDocError(Exception):
    """Base exception for all ddldoc errors.

    Subclass this for specific error categories.
    """

    pass


class TreeShapeError(DdlDocError):
    """The parse tree does not match the expected node shape.

    Raised while decoding the external tree when a required key is missing
    or a node carries an unexpected discriminator.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize tree shape error with optional node path.

        Args:
            message: Error description
            path: Dotted path of the offending node (e.g. "elements[2].body")
        """
        self.message = message
        self.path = path

        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")


class UnknownParameterDirectionError(TreeShapeError):
    """A method parameter carries a direction tag that is neither request nor response.

    There is no safe default: placing a parameter on the wrong side changes
    the wire layout of both generated structs.
    """

    def __init__(
        self,
        direction: object,
        method_name: str,
        parameter_name: str,
        protocol_name: str | None = None,
    ) -> None:
        """Initialize with the raw direction value.

        Args:
            direction: The raw direction tag found in the tree
            method_name: Method that declares the parameter
            parameter_name: The offending parameter
            protocol_name: Owning protocol, if known
        """
        self.direction = direction
        self.method_name = method_name
        self.parameter_name = parameter_name
        self.protocol_name = protocol_name

        owner = f"{protocol_name}.{method_name}" if protocol_name else method_name
        super().__init__(
            f"Unknown parameter direction {direction!r} for parameter "
            f"'{parameter_name}' of method '{owner}'"
        )


class ConfigError(DdlDocError):
    """Invalid generator configuration.

    Raised when a configuration file cannot be read or holds values of the
    wrong type.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            source: Path of the configuration file (optional)
        """
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")
