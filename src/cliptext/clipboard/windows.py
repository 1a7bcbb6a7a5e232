from cliptext.clipboard import win32_native
from cliptext.clipboard.base import ClipboardBackend
from cliptext.clipboard.external import ExternalUtilityBackend
from cliptext.errors import NativeApiFailedError, UnsupportedStateError
from cliptext.models.platform_context import BackendKind


class NativeModuleBackend(ClipboardBackend):
    """Windows clipboard through pywin32's win32clipboard module."""

    kind = BackendKind.NATIVE_CMDLET

    def _module(self):
        import win32clipboard
        return win32clipboard

    def _open(self, wc) -> None:
        try:
            wc.OpenClipboard()
        except wc.error as e:
            raise NativeApiFailedError("OpenClipboard", str(e)) from e

    def _close(self, wc) -> None:
        try:
            wc.CloseClipboard()
        except wc.error as e:
            raise NativeApiFailedError("CloseClipboard", str(e)) from e

    def get_text(self) -> str:
        wc = self._module()
        self._open(wc)
        try:
            if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                text = ""
            else:
                text = wc.GetClipboardData(wc.CF_UNICODETEXT) or ""
        except wc.error as e:
            raise NativeApiFailedError("GetClipboardData", str(e)) from e
        finally:
            self._close(wc)
        return text

    def set_text(self, text: str) -> None:
        wc = self._module()
        self._open(wc)
        try:
            wc.EmptyClipboard()
            if text:
                wc.SetClipboardText(text, wc.CF_UNICODETEXT)
        except wc.error as e:
            raise NativeApiFailedError("SetClipboardData", str(e)) from e
        finally:
            self._close(wc)


class ClipUtilityBackend(ExternalUtilityBackend):
    """
    Writes through clip.exe, which takes UTF-16LE on stdin.

    clip.exe cannot read, so reads go straight to user32.
    """

    def copy_command(self, path: str) -> str:
        return f"clip < {path}"

    def paste_command(self, path: str) -> str:
        raise UnsupportedStateError("clip.exe cannot read the clipboard")

    def get_text(self) -> str:
        return win32_native.read_unicode_text()
