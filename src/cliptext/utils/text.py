import io
import os
import shutil
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, List, Optional

from rich.console import Console
from rich.pretty import Pretty

from cliptext.utils.codec import NEWLINE_PATTERN, strip_trailing_newline


class LineSequence:
    """
    Lines of a clipboard string, split on LF or CRLF.

    Nothing is consumed by iterating: every pass re-splits the same source
    string, so the sequence can be walked any number of times.
    """

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __iter__(self) -> Iterator[str]:
        start = 0
        for match in NEWLINE_PATTERN.finditer(self._text):
            yield self._text[start:match.start()]
            start = match.end()
        yield self._text[start:]

    def __len__(self) -> int:
        return len(NEWLINE_PATTERN.findall(self._text)) + 1

    def __getitem__(self, index):
        return list(self)[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LineSequence):
            return self._text == other._text
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"LineSequence({list(self)!r})"


def split_lines(text: str) -> LineSequence:
    return LineSequence(text)


def _as_items(items: Any) -> List[Any]:
    if items is None:
        return []
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        return [items]
    return list(items)


def _format_item(item: Any, width: int) -> str:
    if isinstance(item, str):
        return item
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
        highlight=False,
        markup=False,
        emoji=False,
    )
    console.print(Pretty(item, overflow="ellipsis", no_wrap=True), crop=True)
    block = strip_trailing_newline(buffer.getvalue())
    return block.replace("\n", os.linesep)


def render(items: Any, width: Optional[int] = None) -> str:
    """
    Render items the way a console would display them.

    Strings are emitted as-is. Other values are pretty-printed within
    ``width`` columns (the terminal width when omitted) and lines that
    still do not fit are cropped with an ellipsis. The result always ends
    with exactly one line separator unless there is nothing to render.
    """
    values = _as_items(items)
    if not values:
        return ""
    if width is None:
        width = shutil.get_terminal_size().columns
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    parts = [_format_item(value, width) for value in values]
    return os.linesep.join(parts) + os.linesep
