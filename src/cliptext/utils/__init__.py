from cliptext.utils.codec import (
    decode_bytes,
    encode_text,
    encoding_for,
    normalize_newlines,
    strip_trailing_newline,
)
from cliptext.utils.file_manager import TransferFile, transfer_file
from cliptext.utils.process import COMMAND_NOT_FOUND, run_command_line
from cliptext.utils.text import LineSequence, render, split_lines

__all__ = [
    'COMMAND_NOT_FOUND',
    'LineSequence',
    'TransferFile',
    'decode_bytes',
    'encode_text',
    'encoding_for',
    'normalize_newlines',
    'render',
    'run_command_line',
    'split_lines',
    'strip_trailing_newline',
    'transfer_file',
]
