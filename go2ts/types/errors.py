"""Go Type System - Descriptor Errors"""

from typing import Any


class DescriptorError(Exception):
    """Raised when a type descriptor is built or queried inconsistently."""

    def __init__(self, message: str, context: Any = None):
        super().__init__(message)
        self.context = context
        self.message = message

    def __str__(self) -> str:
        if self.context is not None:
            return f"{self.message}\nContext: {self.context}"
        return self.message
