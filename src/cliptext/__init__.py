"""
cliptext - cross-platform text clipboard access.

    from cliptext import get_clipboard_text, set_clipboard_text

    set_clipboard_text("one\\ntwo")
    list(get_clipboard_text())      # ['one', 'two']
"""

from cliptext.errors import (
    ClipboardError,
    DependencyMissingError,
    ExternalUtilityFailedError,
    NativeApiFailedError,
    UnsupportedStateError,
)
from cliptext.services.clipboard_service import ClipboardService, get_clipboard_text, set_clipboard_text

__version__ = "0.1.0"

__all__ = [
    'ClipboardError',
    'ClipboardService',
    'DependencyMissingError',
    'ExternalUtilityFailedError',
    'NativeApiFailedError',
    'UnsupportedStateError',
    'get_clipboard_text',
    'set_clipboard_text',
]
