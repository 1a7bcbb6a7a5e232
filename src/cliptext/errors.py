"""
Clipboard error taxonomy.

Every failure raised by a backend is one of these. The CLI prints the
message of a ClipboardError and exits without a traceback.
"""

from typing import Optional, Sequence, Union


class ClipboardError(Exception):
    """Base class for all clipboard failures."""


class DependencyMissingError(ClipboardError):

    def __init__(self, dependency: str, remedy: str):
        self.dependency = dependency
        self.remedy = remedy
        super().__init__(
            f"'{dependency}' is required for clipboard access but was not found. "
            f"Install it with: {remedy}"
        )


class ExternalUtilityFailedError(ClipboardError):

    def __init__(self, command: Union[str, Sequence[str]], exit_code: int):
        self.command = command
        self.exit_code = exit_code
        super().__init__(
            f"Native clipboard utility invocation failed "
            f"(exit code {exit_code}): {command}"
        )


class NativeApiFailedError(ClipboardError):

    def __init__(self, operation: str, detail: Optional[str] = None):
        self.operation = operation
        message = f"Clipboard API call failed: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnsupportedStateError(ClipboardError):
    """No clipboard strategy exists for the detected platform and mode."""
