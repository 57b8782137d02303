"""
Exceptions raised by the Go to TypeScript converter.

A conversion only fails when a descriptor of a kind the converter does not
model reaches the dispatcher. Emitting a placeholder instead would silently
corrupt generated code, so the error always propagates to the caller.
"""

from typing import Any

from go2ts.types import Kind


class ConversionError(Exception):
    """Exception raised when a type cannot be converted to TypeScript.

    Examples:
        >>> from go2ts.types import COMPLEX128
        >>> raise ConversionError.unhandled(COMPLEX128)
        ConversionError: unhandled type: complex128 (complex128)
    """

    def __init__(
        self, message: str, descriptor: Any = None, kind: Kind | None = None
    ):
        """Initialize the exception with a message and the offending descriptor.

        Args:
            message: The error message
            descriptor: Descriptor that could not be converted
            kind: Kind of the descriptor
        """
        self.message = message
        self.descriptor = descriptor
        self.kind = kind
        super().__init__(message)

    @classmethod
    def unhandled(cls, descriptor: Any) -> "ConversionError":
        """Build the error for a descriptor whose kind has no conversion rule."""
        kind = descriptor.kind
        name = descriptor.name or str(descriptor)
        return cls(f"unhandled type: {name} ({kind})", descriptor, kind)
