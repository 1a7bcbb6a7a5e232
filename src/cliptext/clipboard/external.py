"""
Clipboard access through platform command-line utilities.

Text travels through a temporary transfer file and a shell redirection,
so the utilities never see Python's own stdio encoding.
"""

import logging
from abc import abstractmethod
from typing import Optional

from cliptext.clipboard.base import ClipboardBackend
from cliptext.config import ClipboardSettings
from cliptext.errors import ExternalUtilityFailedError
from cliptext.models.platform_context import BackendKind, PlatformContext
from cliptext.utils.codec import decode_bytes, encode_text
from cliptext.utils.file_manager import transfer_file
from cliptext.utils.process import Runner, quote_path, run_command_line

logger = logging.getLogger(__name__)


class ExternalUtilityBackend(ClipboardBackend):
    kind = BackendKind.EXTERNAL_UTILITY

    def __init__(
        self,
        context: PlatformContext,
        settings: Optional[ClipboardSettings] = None,
        runner: Optional[Runner] = None,
    ):
        super().__init__(context, settings)
        self._runner = runner or run_command_line

    @abstractmethod
    def copy_command(self, path: str) -> str:
        """Shell command line that copies the file at path to the clipboard."""

    @abstractmethod
    def paste_command(self, path: str) -> str:
        """Shell command line that writes the clipboard text into path."""

    def check_exit(self, command_line: str, exit_code: int) -> None:
        if exit_code != 0:
            raise ExternalUtilityFailedError(command_line, exit_code)

    def _run(self, command_line: str) -> None:
        exit_code = self._runner(command_line, self.context.os_family)
        self.check_exit(command_line, exit_code)

    def set_text(self, text: str) -> None:
        with transfer_file(self.settings.temp_dir) as transfer:
            transfer.write_bytes(encode_text(text, self.context.os_family))
            command_line = self.copy_command(
                quote_path(str(transfer), self.context.os_family))
            logger.debug(f"Copying {len(text)} characters via external utility")
            self._run(command_line)

    def get_text(self) -> str:
        with transfer_file(self.settings.temp_dir) as transfer:
            command_line = self.paste_command(
                quote_path(str(transfer), self.context.os_family))
            self._run(command_line)
            return decode_bytes(transfer.read_bytes(), self.context.os_family)
