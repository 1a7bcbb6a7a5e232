"""
Direct user32 clipboard reads through ctypes.

This is more dependable than going through a GUI toolkit and works from
any COM apartment. The function prototypes are bound once per process on
first use.
"""

import ctypes
import logging
from typing import Any, Callable, Optional

from cliptext.errors import NativeApiFailedError

logger = logging.getLogger(__name__)

CF_UNICODETEXT = 13


class Win32ClipboardApi:
    def __init__(
        self,
        open_clipboard: Callable[..., Any],
        close_clipboard: Callable[..., Any],
        is_format_available: Callable[..., Any],
        get_clipboard_data: Callable[..., Any],
        global_lock: Callable[..., Any],
        global_unlock: Callable[..., Any],
        wstring_at: Callable[..., str] = ctypes.wstring_at,
        get_last_error: Callable[[], int] = lambda: 0,
    ):
        self.open_clipboard = open_clipboard
        self.close_clipboard = close_clipboard
        self.is_format_available = is_format_available
        self.get_clipboard_data = get_clipboard_data
        self.global_lock = global_lock
        self.global_unlock = global_unlock
        self.wstring_at = wstring_at
        self.get_last_error = get_last_error


_api: Optional[Win32ClipboardApi] = None


def _bind_api() -> Win32ClipboardApi:
    try:
        from ctypes import wintypes
        user32 = ctypes.WinDLL("user32", use_last_error=True)
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    except (AttributeError, ImportError, OSError, ValueError) as e:
        raise NativeApiFailedError("load user32/kernel32", str(e)) from e

    user32.OpenClipboard.argtypes = [wintypes.HWND]
    user32.OpenClipboard.restype = wintypes.BOOL
    user32.CloseClipboard.argtypes = []
    user32.CloseClipboard.restype = wintypes.BOOL
    user32.IsClipboardFormatAvailable.argtypes = [wintypes.UINT]
    user32.IsClipboardFormatAvailable.restype = wintypes.BOOL
    user32.GetClipboardData.argtypes = [wintypes.UINT]
    user32.GetClipboardData.restype = wintypes.HANDLE
    kernel32.GlobalLock.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalLock.restype = wintypes.LPVOID
    kernel32.GlobalUnlock.argtypes = [wintypes.HGLOBAL]
    kernel32.GlobalUnlock.restype = wintypes.BOOL

    return Win32ClipboardApi(
        open_clipboard=user32.OpenClipboard,
        close_clipboard=user32.CloseClipboard,
        is_format_available=user32.IsClipboardFormatAvailable,
        get_clipboard_data=user32.GetClipboardData,
        global_lock=kernel32.GlobalLock,
        global_unlock=kernel32.GlobalUnlock,
        get_last_error=ctypes.get_last_error,
    )


def get_api() -> Win32ClipboardApi:
    global _api
    if _api is None:
        _api = _bind_api()
        logger.debug("Bound user32 clipboard functions")
    return _api


def is_initialized() -> bool:
    return _api is not None


def _read_open_clipboard(api: Win32ClipboardApi) -> str:
    if not api.is_format_available(CF_UNICODETEXT):
        return ""
    handle = api.get_clipboard_data(CF_UNICODETEXT)
    if not handle:
        return ""
    pointer = api.global_lock(handle)
    if not pointer:
        return ""
    try:
        return api.wstring_at(pointer)
    finally:
        api.global_unlock(handle)


def read_unicode_text() -> str:
    """Return the CF_UNICODETEXT contents of the clipboard, or ''."""
    api = get_api()
    if not api.open_clipboard(None):
        raise NativeApiFailedError(
            "OpenClipboard", f"error {api.get_last_error()}")
    try:
        text = _read_open_clipboard(api)
    finally:
        closed = api.close_clipboard()
    if not closed:
        raise NativeApiFailedError(
            "CloseClipboard", f"error {api.get_last_error()}")
    return text
