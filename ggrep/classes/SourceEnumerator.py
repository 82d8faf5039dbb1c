import os
import zipfile
from functools import partial
from typing import Any, Callable, Iterable, Iterator, NamedTuple, Optional

from ggrep.functions.should_process import is_archive, should_process

# What opening a file or an archive member can raise.
OPEN_ERRORS = (OSError, zipfile.BadZipFile, RuntimeError, NotImplementedError)


class ScanRequest(NamedTuple):
    path: str
    display_name: str
    member: bool
    opener: Callable[[], Any]

    def open(self):
        """Open the underlying binary stream; use it in a ``with`` block."""
        return self.opener()


class SourceEnumerator:
    """Finds the files under ``root`` that pass the extension filter.

    ``files()`` yields qualifying paths in lexical walk order and
    ``requests(path)`` turns one of them into ScanRequests, one per zip
    member for archives. Nothing is opened until a request is used, and an
    archive stays open only while its members are being handed out.
    """

    def __init__(self, root: str, extension: str, logger=None, exclude: Iterable[Optional[str]] = ()) -> None:
        self.root = root
        self.extension = extension
        self.logger = logger
        self.exclude = {os.path.realpath(path) for path in exclude if path}

    def files(self) -> Iterator[str]:
        for path in self._walk(self.root):
            if os.path.realpath(path) in self.exclude:
                continue
            if should_process(os.path.basename(path), self.extension):
                yield path

    def requests(self, path: str) -> Iterator[ScanRequest]:
        name = os.path.basename(path)
        if is_archive(name):
            yield from self._archive_members(path)
        else:
            yield ScanRequest(path, name, False, partial(open, path, "rb"))

    def _walk(self, directory: str) -> Iterator[str]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            self._report(f"Error scanning directory {directory}: {exc}")
            return
        for entry in entries:
            path = os.path.normpath(os.path.join(directory, entry.name))
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                self._report(f"{path}: {exc}")
                continue
            if is_dir:
                yield from self._walk(path)
            elif is_file:
                yield path

    def _archive_members(self, path: str) -> Iterator[ScanRequest]:
        try:
            archive = zipfile.ZipFile(path)
        except (OSError, zipfile.BadZipFile) as exc:
            self._report(f"Error opening zip {path}: {exc}")
            return
        with archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                yield ScanRequest(path, info.filename, True, partial(archive.open, info))

    def _report(self, msg: str) -> None:
        if self.logger is not None:
            self.logger.error(msg)
