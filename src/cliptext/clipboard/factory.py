"""
Clipboard backend selection.

The platform facts are detected once (see PlatformContext) and this
module maps them to exactly one backend variant.
"""

import logging
from typing import Optional

from cliptext.clipboard.base import ClipboardBackend
from cliptext.config import ClipboardSettings, get_settings
from cliptext.errors import UnsupportedStateError
from cliptext.models.platform_context import (
    ApartmentState,
    BackendKind,
    OSFamily,
    PlatformContext,
    RuntimeEdition,
    get_platform_context,
)

logger = logging.getLogger(__name__)


def select_backend_kind(context: PlatformContext) -> BackendKind:
    """
    Pick the strategy for the given platform facts.

    Args:
        context: Detected platform facts

    Returns:
        BackendKind: The strategy to use
    """
    if context.runtime_edition is RuntimeEdition.DESKTOP:
        if context.apartment_state is ApartmentState.MTA:
            return BackendKind.HELPER_UI_MEDIATOR
        if context.native_api_available:
            return BackendKind.NATIVE_CMDLET
        return BackendKind.IN_PROCESS_API
    return BackendKind.EXTERNAL_UTILITY


def _external_backend(context: PlatformContext, settings: ClipboardSettings) -> ClipboardBackend:
    if context.os_family is OSFamily.WINDOWS:
        from cliptext.clipboard.windows import ClipUtilityBackend
        return ClipUtilityBackend(context, settings)
    elif context.os_family is OSFamily.MACOS:
        from cliptext.clipboard.macos import PasteboardBackend
        return PasteboardBackend(context, settings)
    elif context.os_family is OSFamily.LINUX:
        from cliptext.clipboard.linux import XclipBackend
        return XclipBackend(context, settings)
    raise UnsupportedStateError(f"Platform '{context.os_family}' is not supported")


def create_backend(
    kind: BackendKind,
    context: PlatformContext,
    settings: Optional[ClipboardSettings] = None,
) -> ClipboardBackend:
    """
    Instantiate a backend of the given kind.

    Raises:
        UnsupportedStateError: If the kind cannot run on this platform
    """
    settings = settings or get_settings()

    if kind is BackendKind.EXTERNAL_UTILITY:
        return _external_backend(context, settings)

    if context.os_family is not OSFamily.WINDOWS:
        raise UnsupportedStateError(
            f"Backend '{kind.value}' requires Windows, "
            f"running on {context.os_family.value}")

    if kind is BackendKind.NATIVE_CMDLET:
        if not context.native_api_available:
            raise UnsupportedStateError(
                "Backend 'native-cmdlet' requires pywin32 (pip install pywin32)")
        from cliptext.clipboard.windows import NativeModuleBackend
        return NativeModuleBackend(context, settings)

    from cliptext.clipboard.tk import TkClipboardBackend
    return TkClipboardBackend(
        context, settings, use_widget=kind is BackendKind.HELPER_UI_MEDIATOR)


def get_clipboard_backend(
    context: Optional[PlatformContext] = None,
    settings: Optional[ClipboardSettings] = None,
) -> ClipboardBackend:
    """
    Create the backend for the current platform, honouring a forced
    ``backend`` setting.
    """
    context = context or get_platform_context()
    settings = settings or get_settings()

    kind = settings.backend or select_backend_kind(context)
    backend = create_backend(kind, context, settings)
    logger.debug(f"Selected clipboard backend {backend!r}")
    return backend
