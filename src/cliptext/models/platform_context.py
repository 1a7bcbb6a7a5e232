import ctypes
import importlib.util
import logging
import platform
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# ole32 APTTYPE values
_APTTYPE_STA = 0
_APTTYPE_MAINSTA = 3
_CO_E_NOTINITIALIZED = -2147221008

_context: Optional["PlatformContext"] = None


class OSFamily(str, Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


class RuntimeEdition(str, Enum):
    DESKTOP = "desktop"
    CORE = "core"


class ApartmentState(str, Enum):
    STA = "sta"
    MTA = "mta"


class BackendKind(str, Enum):
    NATIVE_CMDLET = "native-cmdlet"
    IN_PROCESS_API = "in-process-api"
    HELPER_UI_MEDIATOR = "helper-ui-mediator"
    EXTERNAL_UTILITY = "external-utility"


@dataclass(frozen=True)
class PlatformContext:
    """Immutable facts about the running process that drive backend selection."""
    os_family: OSFamily
    runtime_edition: RuntimeEdition
    apartment_state: Optional[ApartmentState] = None
    native_api_available: bool = False
    clip_utility_available: bool = False

    @property
    def is_windows(self) -> bool:
        return self.os_family is OSFamily.WINDOWS

    @classmethod
    def detect(cls) -> "PlatformContext":
        os_family = detect_os_family()
        if os_family is not OSFamily.WINDOWS:
            return cls(os_family=os_family, runtime_edition=RuntimeEdition.CORE)

        has_tk = _module_available("tkinter")
        return cls(
            os_family=os_family,
            runtime_edition=RuntimeEdition.DESKTOP if has_tk else RuntimeEdition.CORE,
            apartment_state=detect_apartment_state(),
            native_api_available=_module_available("win32clipboard"),
            clip_utility_available=shutil.which("clip") is not None,
        )


def detect_os_family() -> OSFamily:
    system = platform.system()
    if system == "Windows":
        return OSFamily.WINDOWS
    if system == "Darwin":
        return OSFamily.MACOS
    # Other Unix flavours go through xclip like Linux
    return OSFamily.LINUX


def detect_apartment_state() -> ApartmentState:
    """
    Query the COM apartment of the calling thread.

    A thread that never initialised COM can use the clipboard APIs like an
    STA thread, so it reports STA. Neutral apartments report MTA.
    """
    apt_type = ctypes.c_int(0)
    apt_qualifier = ctypes.c_int(0)
    try:
        result = ctypes.windll.ole32.CoGetApartmentType(
            ctypes.byref(apt_type), ctypes.byref(apt_qualifier))
    except (AttributeError, OSError) as e:
        logger.debug(f"CoGetApartmentType unavailable: {e}")
        return ApartmentState.STA

    if result == _CO_E_NOTINITIALIZED:
        return ApartmentState.STA
    if result != 0:
        logger.debug(f"CoGetApartmentType returned {result:#x}")
        return ApartmentState.STA
    if apt_type.value in (_APTTYPE_STA, _APTTYPE_MAINSTA):
        return ApartmentState.STA
    return ApartmentState.MTA


def _module_available(name: str) -> bool:
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        return False


def get_platform_context() -> PlatformContext:
    global _context
    if _context is None:
        _context = PlatformContext.detect()
        logger.info(
            f"Detected platform: {_context.os_family.value}/"
            f"{_context.runtime_edition.value}")
    return _context


def reset_platform_context() -> None:
    global _context
    _context = None
