from __future__ import annotations

import os
from typing import List, Optional

import pytest

from cliptext.clipboard.base import ClipboardBackend
from cliptext.config import ClipboardSettings, set_settings
from cliptext.models.platform_context import (
    ApartmentState,
    BackendKind,
    OSFamily,
    PlatformContext,
    RuntimeEdition,
    reset_platform_context,
)
from cliptext.services import clipboard_service


class MemoryBackend(ClipboardBackend):
    """Clipboard held in a Python attribute, recording every write."""

    kind = BackendKind.IN_PROCESS_API

    def __init__(self, context: PlatformContext, settings: Optional[ClipboardSettings] = None):
        super().__init__(context, settings)
        self.content = ""
        self.writes: List[str] = []
        self.clears = 0

    def get_text(self) -> str:
        return self.content

    def set_text(self, text: str) -> None:
        self.writes.append(text)
        self.content = text

    def clear(self) -> None:
        self.clears += 1
        super().clear()


class RecordingRunner:
    """Stands in for run_command_line; returns a fixed exit status."""

    def __init__(self, exit_code: int = 0, output: bytes = b""):
        self.exit_code = exit_code
        self.output = output
        self.calls: List[str] = []
        self.inputs: List[bytes] = []

    def __call__(self, command_line: str, os_family: OSFamily) -> int:
        self.calls.append(command_line)
        if "<" in command_line:
            path = command_line.split("<", 1)[1].strip().strip('"').strip("'")
            if os.path.exists(path):
                with open(path, "rb") as handle:
                    self.inputs.append(handle.read())
        elif ">" in command_line:
            path = command_line.split(">", 1)[1].strip().strip('"').strip("'")
            with open(path, "wb") as handle:
                handle.write(self.output)
        return self.exit_code


@pytest.fixture(autouse=True)
def _isolated_state():
    set_settings(ClipboardSettings())
    reset_platform_context()
    clipboard_service._default_service = None
    yield
    set_settings(None)
    reset_platform_context()
    clipboard_service._default_service = None


@pytest.fixture
def settings(tmp_path) -> ClipboardSettings:
    return ClipboardSettings(temp_dir=tmp_path / "transfer")


@pytest.fixture
def linux_context() -> PlatformContext:
    return PlatformContext(os_family=OSFamily.LINUX, runtime_edition=RuntimeEdition.CORE)


@pytest.fixture
def macos_context() -> PlatformContext:
    return PlatformContext(os_family=OSFamily.MACOS, runtime_edition=RuntimeEdition.CORE)


@pytest.fixture
def windows_core_context() -> PlatformContext:
    return PlatformContext(
        os_family=OSFamily.WINDOWS,
        runtime_edition=RuntimeEdition.CORE,
        apartment_state=ApartmentState.STA,
        clip_utility_available=True,
    )


@pytest.fixture
def memory_backend(linux_context, settings) -> MemoryBackend:
    return MemoryBackend(linux_context, settings)


@pytest.fixture
def service(linux_context, settings, memory_backend) -> clipboard_service.ClipboardService:
    return clipboard_service.ClipboardService(
        context=linux_context, settings=settings, backend=memory_backend)
