from cliptext.clipboard.external import ExternalUtilityBackend

# pbcopy/pbpaste pick their text encoding from the locale
_LOCALE = "LANG=en_US.UTF-8"


class PasteboardBackend(ExternalUtilityBackend):
    """General pasteboard through pbcopy and pbpaste."""

    def copy_command(self, path: str) -> str:
        return f"{_LOCALE} pbcopy < {path}"

    def paste_command(self, path: str) -> str:
        return f"{_LOCALE} pbpaste > {path}"
