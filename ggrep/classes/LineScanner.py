import lzma
import zipfile
import zlib

READ_ERRORS = (OSError, EOFError, zipfile.BadZipFile, zlib.error, lzma.LZMAError)


class LineScanner:
    """Splits a stream into 1-based (number, text) pairs.

    Works on binary streams (files opened ``rb``, zip member readers) and on
    text streams. Undecodable bytes become surrogate escapes, so the original
    bytes come back when the text is encoded with ``surrogateescape``. One
    trailing ``\\r`` is dropped from every line and the last
    line is kept even without a terminator. A read error stops iteration;
    the exception is left on ``self.error`` for the caller to report.
    """

    def __init__(self, stream, encoding="utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.error = None
        self.line_number = 0
        self._consumed = False

    def __iter__(self):
        if self._consumed:
            raise RuntimeError("LineScanner already consumed its stream")
        self._consumed = True
        lines = iter(self.stream)
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except READ_ERRORS as exc:
                self.error = exc
                return
            self.line_number += 1
            yield self.line_number, self._text(raw)

    def _text(self, raw):
        if isinstance(raw, bytes):
            raw = raw.decode(self.encoding, errors="surrogateescape")
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        return raw
