import os
import re

import pytest

from cliptext.config import ClipboardSettings
from cliptext.services import clipboard_service
from cliptext.services.clipboard_service import ClipboardService, get_clipboard_text, set_clipboard_text
from cliptext.utils.text import LineSequence


@pytest.mark.parametrize("text", [
    "plain",
    "with spaces  ",
    "multi\nline",
    "crlf\r\nline",
    "unicode ✓ 日本",
    "x" * 500,
])
def test_round_trip_raw(service, text):
    service.set_text(text)
    assert service.get_text(raw=True) == text


@pytest.mark.parametrize("args", [(None,), ("",), ()])
def test_clearing_variants_read_back_absent(service, memory_backend, args):
    service.set_text("something")
    service.set_text(*args)

    assert service.get_text(raw=True) is None
    assert service.get_text() is None
    assert memory_backend.clears == 1


def test_empty_list_clears(service, memory_backend):
    service.set_text([])
    assert memory_backend.clears == 1


def test_lines_mode_splits(service):
    service.set_text("one\ntwo")
    lines = service.get_text()
    assert isinstance(lines, LineSequence)
    assert list(lines) == ["one", "two"]


def test_lines_mode_accepts_crlf(service, memory_backend):
    memory_backend.content = "one\r\ntwo"
    assert list(service.get_text()) == ["one", "two"]


def test_raw_mode_is_untrimmed(service, memory_backend):
    memory_backend.content = "trailing\n\n"
    assert service.get_text(raw=True) == "trailing\n\n"


def test_single_trailing_newline_is_stripped(service, memory_backend):
    service.set_text("a\nb\n")
    raw = service.get_text(raw=True)
    assert raw == "a\nb\n"
    assert not re.search(r"(\r?\n){2}\Z", raw)


def test_only_one_trailing_newline_is_stripped(service):
    service.set_text("a\n\n")
    assert service.get_text(raw=True) == "a\n\n"


def test_multiple_items_joined_with_line_separator(service):
    service.set_text(["one", "two", "three"])
    assert service.get_text(raw=True) == os.linesep.join(["one", "two", "three"])


def test_pass_thru_returns_written_text(service, memory_backend):
    result = service.set_text(["x", "y"], pass_thru=True)
    assert result == os.linesep.join(["x", "y"])
    assert memory_backend.writes[-1] == result
    assert service.get_text(raw=True) == result


def test_pass_thru_off_returns_none(service):
    assert service.set_text("x") is None


def test_pass_thru_on_empty_returns_none(service):
    assert service.set_text("", pass_thru=True) is None


def test_width_truncation(service):
    value = {"key": "v" * 80}
    service.set_text([value], width=30)
    narrow = service.get_text(raw=True)
    assert any(line.endswith("…") for line in narrow.splitlines())

    service.set_text([value], width=200)
    wide = service.get_text(raw=True)
    assert "…" not in wide


def test_newline_setting_normalizes_written_text(linux_context, memory_backend, tmp_path):
    service = ClipboardService(
        context=linux_context,
        settings=ClipboardSettings(temp_dir=tmp_path, newline="crlf"),
        backend=memory_backend,
    )
    service.set_text("a\nb\r\nc")
    assert memory_backend.content == "a\r\nb\r\nc"


def test_backend_is_selected_from_context(monkeypatch, linux_context, settings):
    selected = []

    def fake_get_backend(context, current_settings):
        selected.append((context, current_settings))
        from conftest import MemoryBackend
        return MemoryBackend(context, current_settings)

    monkeypatch.setattr(clipboard_service, "get_clipboard_backend", fake_get_backend)
    service = ClipboardService(context=linux_context, settings=settings)

    service.set_text("x")
    service.get_text()

    assert selected == [(linux_context, settings), (linux_context, settings)]


def test_module_functions_use_default_service(monkeypatch, service):
    monkeypatch.setattr(clipboard_service, "_default_service", service)
    set_clipboard_text("shared")
    assert get_clipboard_text(raw=True) == "shared"
