from cliptext.models.platform_context import (
    ApartmentState,
    BackendKind,
    OSFamily,
    PlatformContext,
    RuntimeEdition,
    get_platform_context,
    reset_platform_context,
)

__all__ = [
    'ApartmentState',
    'BackendKind',
    'OSFamily',
    'PlatformContext',
    'RuntimeEdition',
    'get_platform_context',
    'reset_platform_context',
]
