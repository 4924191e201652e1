"""UTF-8 byte sink shared by console and file output.

Every rendered line is encoded here, so console and file output carry the
same bytes. File output is prefixed with a UTF-8 byte-order marker so
editors detect the encoding without guessing.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

OUTPUT_ENCODING = "utf-8"
UTF8_BOM = b"\xef\xbb\xbf"
LINE_TERMINATOR = "\n"


class TextEncodingError(UnicodeError):
    """Raised when a line cannot be encoded for the destination stream."""


def encode_line(line: str) -> bytes:
    """Encode ``line`` plus a line terminator as strict UTF-8.

    Lone surrogates (e.g. from undecodable byte filenames) are rejected.
    """
    try:
        return (line + LINE_TERMINATOR).encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as exc:
        raise TextEncodingError(f"cannot encode output line as {OUTPUT_ENCODING}: {line!r}") from exc


class TextSink:
    """Line-oriented writer over a binary stream.

    Used as a context manager; the stream is closed on exit only when the sink
    owns it (file output), never for stdout.
    """

    def __init__(self, stream: BinaryIO, owns_stream: bool = False) -> None:
        self.stream = stream
        self.owns_stream = owns_stream

    def write_line(self, line: str) -> None:
        self.stream.write(encode_line(line))

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        self.flush()
        if self.owns_stream:
            self.stream.close()

    def __enter__(self) -> TextSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def console_sink() -> TextSink:
    """Return a sink writing UTF-8 bytes straight to stdout's binary buffer.

    Pending text-layer output is flushed first so bytes never interleave out
    of order.
    """
    stdout = sys.stdout
    stdout.flush()
    return TextSink(stdout.buffer)


def open_file_sink(path: Path) -> TextSink:
    """Create or truncate ``path``, write the BOM, and return a sink owning it.

    ``OSError`` from opening the file propagates to the caller.
    """
    handle = open(path, "wb")
    try:
        handle.write(UTF8_BOM)
    except OSError:
        handle.close()
        raise
    return TextSink(handle, owns_stream=True)


__all__ = [
    "OUTPUT_ENCODING",
    "UTF8_BOM",
    "LINE_TERMINATOR",
    "TextEncodingError",
    "encode_line",
    "TextSink",
    "console_sink",
    "open_file_sink",
]
