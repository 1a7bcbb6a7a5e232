from abc import ABC, abstractmethod
from typing import Optional

from cliptext.config import ClipboardSettings, get_settings
from cliptext.models.platform_context import BackendKind, PlatformContext


class ClipboardBackend(ABC):
    """One strategy for reading and writing clipboard text."""

    kind: BackendKind

    def __init__(self, context: PlatformContext, settings: Optional[ClipboardSettings] = None):
        self.context = context
        self.settings = settings or get_settings()

    @abstractmethod
    def get_text(self) -> str:
        """Return the clipboard text, or an empty string when there is none."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the clipboard contents with text."""

    def clear(self) -> None:
        self.set_text("")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r})"
