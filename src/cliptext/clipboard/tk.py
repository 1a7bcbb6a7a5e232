import logging
from contextlib import contextmanager
from typing import Optional

from cliptext.clipboard import win32_native
from cliptext.clipboard.base import ClipboardBackend
from cliptext.config import ClipboardSettings
from cliptext.errors import ExternalUtilityFailedError, NativeApiFailedError, UnsupportedStateError
from cliptext.models.platform_context import BackendKind, PlatformContext
from cliptext.utils.process import Runner, run_command_line

logger = logging.getLogger(__name__)

# Stand-in for "" where the widget path cannot copy an empty selection
NUL = "\0"

_CLEAR_WITH_CLIP = "clip < NUL"


class TkClipboardBackend(ClipboardBackend):
    """
    Clipboard access through a hidden Tk root window.

    In STA threads the Tk clipboard object is used directly. In MTA threads
    direct calls are unreliable, so text is copied from and pasted into a
    hidden Text widget instead (``use_widget=True``).

    On Windows reads go through user32 unless ``low_level_reads`` is off.
    """

    def __init__(
        self,
        context: PlatformContext,
        settings: Optional[ClipboardSettings] = None,
        use_widget: bool = False,
        runner: Optional[Runner] = None,
    ):
        super().__init__(context, settings)
        self.use_widget = use_widget
        self.kind = BackendKind.HELPER_UI_MEDIATOR if use_widget else BackendKind.IN_PROCESS_API
        self._runner = runner or run_command_line

    def _tkinter(self):
        import tkinter
        return tkinter

    @contextmanager
    def _root(self):
        tk = self._tkinter()
        try:
            root = tk.Tk()
        except tk.TclError as e:
            raise UnsupportedStateError(f"Tk is not usable here: {e}") from e
        root.withdraw()
        try:
            yield tk, root
        finally:
            root.destroy()

    def get_text(self) -> str:
        if self.context.is_windows and self.settings.low_level_reads:
            text = win32_native.read_unicode_text()
        else:
            with self._root() as (tk, root):
                if self.use_widget:
                    text = self._paste_from_widget(tk, root)
                else:
                    text = self._clipboard_get(tk, root)
        return "" if text == NUL else text

    def _clipboard_get(self, tk, root) -> str:
        try:
            return root.clipboard_get()
        except tk.TclError:
            # Raised when the clipboard holds no text
            return ""

    def _paste_from_widget(self, tk, root) -> str:
        widget = tk.Text(root)
        widget.event_generate("<<Paste>>")
        return widget.get("1.0", "end-1c")

    def _copy_from_widget(self, tk, root, text: str) -> None:
        widget = tk.Text(root)
        widget.insert("1.0", text)
        widget.tag_add("sel", "1.0", "end-1c")
        widget.event_generate("<<Copy>>")

    def _clear_with_clip(self) -> None:
        exit_code = self._runner(_CLEAR_WITH_CLIP, self.context.os_family)
        if exit_code != 0:
            raise ExternalUtilityFailedError(_CLEAR_WITH_CLIP, exit_code)

    def set_text(self, text: str) -> None:
        if not text and self.use_widget:
            if self.context.clip_utility_available:
                logger.debug("Clearing clipboard through clip.exe")
                self._clear_with_clip()
                return
            text = NUL

        with self._root() as (tk, root):
            try:
                if self.use_widget:
                    self._copy_from_widget(tk, root, text)
                else:
                    root.clipboard_clear()
                    if text:
                        root.clipboard_append(text)
                root.update()
            except tk.TclError as e:
                raise NativeApiFailedError("Tk clipboard", str(e)) from e
