"""
Cross-platform clipboard backends.

Each backend implements the same text read/write interface; the factory
picks the one that fits the running platform.
"""

from cliptext.clipboard.base import ClipboardBackend
from cliptext.clipboard.factory import create_backend, get_clipboard_backend, select_backend_kind

__all__ = [
    'ClipboardBackend',
    'create_backend',
    'get_clipboard_backend',
    'select_backend_kind',
]
