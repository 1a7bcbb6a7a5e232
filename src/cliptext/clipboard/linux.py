from cliptext.clipboard.external import ExternalUtilityBackend
from cliptext.errors import DependencyMissingError
from cliptext.utils.process import COMMAND_NOT_FOUND

XCLIP_REMEDY = "sudo apt install xclip (or your distribution's equivalent)"


class XclipBackend(ExternalUtilityBackend):
    """X11 clipboard through xclip."""

    def _xclip(self) -> str:
        return f"xclip -selection {self.settings.xclip_selection}"

    def copy_command(self, path: str) -> str:
        return f"{self._xclip()} -in < {path}"

    def paste_command(self, path: str) -> str:
        return f"{self._xclip()} -out > {path}"

    def check_exit(self, command_line: str, exit_code: int) -> None:
        if exit_code == COMMAND_NOT_FOUND:
            raise DependencyMissingError("xclip", XCLIP_REMEDY)
        super().check_exit(command_line, exit_code)
