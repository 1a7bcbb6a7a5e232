from .clipboard_service import ClipboardService, get_clipboard_text, get_default_service, set_clipboard_text

__all__ = ['ClipboardService', 'get_clipboard_text', 'get_default_service', 'set_clipboard_text']
