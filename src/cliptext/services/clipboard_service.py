import logging
from typing import Any, Optional, Union

from cliptext.clipboard.base import ClipboardBackend
from cliptext.clipboard.factory import get_clipboard_backend
from cliptext.config import ClipboardSettings, get_settings
from cliptext.models.platform_context import PlatformContext, get_platform_context
from cliptext.utils.codec import normalize_newlines, strip_trailing_newline
from cliptext.utils.text import LineSequence, render, split_lines

logger = logging.getLogger(__name__)

ClipboardText = Optional[str]


class ClipboardService:
    """
    Uniform text clipboard operations on top of whichever backend fits
    the platform.

    An empty clipboard and an empty string are the same thing here: both
    read back as None.
    """

    def __init__(
        self,
        context: Optional[PlatformContext] = None,
        settings: Optional[ClipboardSettings] = None,
        backend: Optional[ClipboardBackend] = None,
    ) -> None:
        self._context = context
        self._settings = settings
        self._backend = backend

    @property
    def context(self) -> PlatformContext:
        return self._context or get_platform_context()

    @property
    def settings(self) -> ClipboardSettings:
        return self._settings or get_settings()

    def backend(self) -> ClipboardBackend:
        if self._backend is not None:
            return self._backend
        return get_clipboard_backend(self.context, self.settings)

    def get_text(self, raw: bool = False) -> Union[str, LineSequence, None]:
        """
        Read the clipboard.

        Args:
            raw: Return the text exactly as retrieved instead of split into lines

        Returns:
            The text (raw), its lines, or None when the clipboard holds no text
        """
        text = self.backend().get_text()
        if not text:
            return None
        if raw:
            return text
        return split_lines(text)

    def set_text(
        self,
        items: Any = None,
        width: Optional[int] = None,
        pass_thru: bool = False,
    ) -> ClipboardText:
        """
        Render items and place the result on the clipboard.

        One trailing newline is dropped from the rendered text. An empty
        result clears the clipboard.

        Returns:
            The text written when pass_thru is set, otherwise None
        """
        text = strip_trailing_newline(render(items, width))
        newline = self.settings.newline_sequence
        if newline:
            text = normalize_newlines(text, newline)

        backend = self.backend()
        if text:
            logger.info(f"Setting clipboard text ({len(text)} characters) via {backend.kind.value}")
            backend.set_text(text)
        else:
            logger.info(f"Clearing clipboard via {backend.kind.value}")
            backend.clear()

        if pass_thru:
            return text or None
        return None


_default_service: Optional[ClipboardService] = None


def get_default_service() -> ClipboardService:
    global _default_service
    if _default_service is None:
        _default_service = ClipboardService()
    return _default_service


def get_clipboard_text(raw: bool = False) -> Union[str, LineSequence, None]:
    return get_default_service().get_text(raw=raw)


def set_clipboard_text(items: Any = None, width: Optional[int] = None, pass_thru: bool = False) -> ClipboardText:
    return get_default_service().set_text(items, width=width, pass_thru=pass_thru)
